"""
Base class for GraphQL mutations

Every mutation of the service subclasses ``BaseMutation``. A subclass names
its payload type and implements ``resolve``; the parameters of ``resolve``
(besides ``info``) become the GraphQL arguments of the mutation field.

Mutations never return null unless they opt in: the generated field is typed
``Payload!`` by default and ``Payload`` only when the subclass sets
``null = True``.

Example:

    class CreateRobot(BaseMutation):
        payload = RobotPayload
        description = "Register a new robot"

        @staticmethod
        async def resolve(info: strawberry.Info, input: CreateRobotInput) -> RobotPayload:
            ...

    Mutation = build_mutation_root(CreateRobot)
"""

import inspect
import re
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Optional, TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from strawberry.types.field import StrawberryField


@dataclass(frozen=True)
class MutationTypeConfig:
    """
    Type descriptors a mutation root is wired with

    Each entry has the signature of the matching Strawberry decorator, so a
    schema can swap in federation-aware (or custom) variants without
    touching the mutations themselves.
    """

    object_type: Callable[..., Any]
    mutation: Callable[..., Any]


DEFAULT_TYPE_CONFIG = MutationTypeConfig(
    object_type=strawberry.type,
    mutation=strawberry.mutation,
)

FEDERATION_TYPE_CONFIG = MutationTypeConfig(
    object_type=strawberry.federation.type,
    mutation=strawberry.federation.field,
)


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


class BaseMutation:
    """Base class for all mutations, results are non-null by default"""

    # Set to True to allow the mutation to resolve to null
    null: ClassVar[bool] = False

    payload: ClassVar[Optional[type]] = None
    name: ClassVar[Optional[str]] = None
    description: ClassVar[Optional[str]] = None
    type_config: ClassVar[MutationTypeConfig] = DEFAULT_TYPE_CONFIG

    # Abstract classes are never registered on a mutation root
    _abstract: ClassVar[bool] = True

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._abstract = abstract
        if abstract:
            return

        if cls.payload is None:
            raise TypeError(f"{cls.__name__} must declare a payload type")

        if cls.resolve is BaseMutation.resolve:
            raise TypeError(f"{cls.__name__} must implement resolve()")

    @staticmethod
    def resolve(info: strawberry.Info) -> Any:
        """Perform the mutation and return an instance of ``payload``"""
        raise NotImplementedError

    @classmethod
    def result_type(cls) -> Any:
        """GraphQL result type of the mutation field"""
        if cls.null:
            return Optional[cls.payload]
        return cls.payload

    @classmethod
    def field_name(cls) -> str:
        """Attribute name of the mutation on the root type"""
        return _snake_case(cls.__name__)

    @classmethod
    def graphql_name(cls) -> str:
        """Name of the mutation field in the schema"""
        if cls.name:
            return cls.name
        head, *rest = cls.field_name().split("_")
        return head + "".join(part.capitalize() for part in rest)

    @classmethod
    def get_description(cls) -> Optional[str]:
        """Explicit description, else the class docstring"""
        if cls.description is not None:
            return cls.description
        if cls.__doc__:
            return inspect.cleandoc(cls.__doc__)
        return None

    @classmethod
    def field(cls, type_config: Optional[MutationTypeConfig] = None) -> "StrawberryField":
        """Build the Strawberry mutation field for this mutation"""
        type_config = type_config or cls.type_config
        return type_config.mutation(
            resolver=cls.resolve,
            name=cls.name,
            description=cls.get_description(),
            graphql_type=cls.result_type(),
        )


def build_mutation_root(
    *mutations: type[BaseMutation],
    name: str = "Mutation",
    type_config: Optional[MutationTypeConfig] = None,
) -> type:
    """
    Create the mutation root type from mutation classes

    Args:
        mutations: BaseMutation subclasses to expose
        name: GraphQL name of the root type
        type_config: overrides each mutation's own ``type_config``

    Returns:
        Strawberry object type with one field per mutation
    """
    if not mutations:
        raise ValueError("At least one mutation is required")

    namespace: dict[str, Any] = {"__module__": __name__}
    graphql_names: set[str] = set()
    for mutation in mutations:
        if not (isinstance(mutation, type) and issubclass(mutation, BaseMutation)):
            raise TypeError(f"{mutation!r} is not a BaseMutation subclass")
        if mutation._abstract:
            raise TypeError(f"{mutation.__name__} is abstract and cannot be registered")

        field_name = mutation.field_name()
        graphql_name = mutation.graphql_name()
        if field_name in namespace or graphql_name in graphql_names:
            raise ValueError(f"Duplicate mutation field: {graphql_name}")
        graphql_names.add(graphql_name)
        namespace[field_name] = mutation.field(type_config)

    object_type = (type_config or DEFAULT_TYPE_CONFIG).object_type
    return object_type(type(name, (), namespace), name=name)
