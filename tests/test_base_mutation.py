from typing import Optional

import pytest
import strawberry

from robot_service.schema import schema as robot_schema
from robot_service.schema.mutations import (
    DEFAULT_TYPE_CONFIG,
    FEDERATION_TYPE_CONFIG,
    BaseMutation,
    CreateRobot,
    MutationTypeConfig,
    build_mutation_root,
)


MUTATION_FIELD_KINDS = """
{
  __schema {
    mutationType {
      fields { name type { kind name ofType { name } } }
    }
  }
}
"""


@strawberry.type
class Query:
    ping: str = "pong"


@strawberry.type
class EchoPayload:
    message: str


class Echo(BaseMutation):
    """Echo the message back"""

    payload = EchoPayload

    @staticmethod
    def resolve(info: strawberry.Info, message: str) -> EchoPayload:
        return EchoPayload(message=message)


class MaybeEcho(BaseMutation):
    payload = EchoPayload
    null = True

    @staticmethod
    def resolve(info: strawberry.Info, message: str) -> Optional[EchoPayload]:
        return EchoPayload(message=message) if message else None


class BrokenEcho(BaseMutation):
    """Returns nothing despite the non-null contract"""

    payload = EchoPayload

    @staticmethod
    def resolve(info: strawberry.Info) -> EchoPayload:
        return None


def mutation_fields(schema: strawberry.Schema) -> dict:
    result = schema.execute_sync(MUTATION_FIELD_KINDS)
    assert result.errors is None
    return {f["name"]: f["type"] for f in result.data["__schema"]["mutationType"]["fields"]}


def build_schema(*mutations, **kwargs) -> strawberry.Schema:
    return strawberry.Schema(query=Query, mutation=build_mutation_root(*mutations, **kwargs))


def test_result_type_defaults_to_payload():
    assert Echo.null is False
    assert Echo.result_type() is EchoPayload
    assert MaybeEcho.result_type() == Optional[EchoPayload]


def test_default_mutation_field_is_non_null():
    fields = mutation_fields(build_schema(Echo, MaybeEcho))

    assert fields["echo"]["kind"] == "NON_NULL"
    assert fields["echo"]["ofType"]["name"] == "EchoPayload"
    assert fields["maybeEcho"]["kind"] == "OBJECT"
    assert fields["maybeEcho"]["name"] == "EchoPayload"


def test_every_service_mutation_without_override_is_non_null():
    fields = mutation_fields(robot_schema)

    assert set(fields) == {"createRobot", "updateRobotStatus", "rechargeRobot", "deleteRobot"}
    for name, field_type in fields.items():
        if name == "deleteRobot":
            assert field_type["kind"] == "OBJECT"
        else:
            assert field_type["kind"] == "NON_NULL", name


def test_sdl_marks_payload_non_null():
    sdl = robot_schema.as_str()

    assert "createRobot(input: CreateRobotInput!): RobotPayload!" in sdl
    assert "deleteRobot(id: ID!): DeleteRobotPayload\n" in sdl


def test_resolve_parameters_become_arguments():
    result = build_schema(Echo).execute_sync('mutation { echo(message: "hi") { message } }')

    assert result.errors is None
    assert result.data == {"echo": {"message": "hi"}}


def test_nullable_mutation_can_return_null():
    result = build_schema(MaybeEcho).execute_sync('mutation { maybeEcho(message: "") { message } }')

    assert result.errors is None
    assert result.data == {"maybeEcho": None}


def test_non_null_mutation_returning_none_is_an_error():
    result = build_schema(BrokenEcho).execute_sync("mutation { brokenEcho { message } }")

    assert result.data is None
    assert len(result.errors) == 1
    assert "Cannot return null for non-nullable field" in result.errors[0].message


def test_description_comes_from_docstring():
    assert Echo.get_description() == "Echo the message back"
    assert MaybeEcho.get_description() is None


def test_explicit_name_and_description():
    class Renamed(BaseMutation):
        payload = EchoPayload
        name = "shout"
        description = "Louder"

        @staticmethod
        def resolve(info: strawberry.Info, message: str) -> EchoPayload:
            return EchoPayload(message=message.upper())

    schema = build_schema(Renamed)
    result = schema.execute_sync('mutation { shout(message: "hi") { message } }')

    assert result.data == {"shout": {"message": "HI"}}
    assert '"""Louder"""' in schema.as_str()


def test_field_name_is_snake_case():
    assert Echo.field_name() == "echo"
    assert CreateRobot.field_name() == "create_robot"


def test_subclass_without_payload_is_rejected():
    with pytest.raises(TypeError, match="payload"):
        class NoPayload(BaseMutation):
            @staticmethod
            def resolve(info: strawberry.Info) -> EchoPayload:
                return EchoPayload(message="")


def test_subclass_without_resolve_is_rejected():
    with pytest.raises(TypeError, match="resolve"):
        class NoResolve(BaseMutation):
            payload = EchoPayload


def test_abstract_intermediate_base_passes_policy_down():
    class NullableMutation(BaseMutation, abstract=True):
        null = True

    class Lookup(NullableMutation):
        payload = EchoPayload

        @staticmethod
        def resolve(info: strawberry.Info) -> Optional[EchoPayload]:
            return None

    result = build_schema(Lookup).execute_sync("mutation { lookup { message } }")

    assert result.errors is None
    assert result.data == {"lookup": None}


def test_root_requires_unique_non_empty_mutations():
    with pytest.raises(ValueError):
        build_mutation_root()

    with pytest.raises(ValueError, match="Duplicate"):
        build_mutation_root(Echo, Echo)


def test_custom_root_name():
    schema = build_schema(Echo, name="EchoMutations")

    assert "type EchoMutations {" in schema.as_str()


def test_federation_type_config_keeps_non_null_default():
    schema = strawberry.federation.Schema(
        query=Query,
        mutation=build_mutation_root(Echo, MaybeEcho, type_config=FEDERATION_TYPE_CONFIG),
    )
    fields = mutation_fields(schema)

    assert fields["echo"]["kind"] == "NON_NULL"
    assert fields["maybeEcho"]["kind"] == "OBJECT"


def test_base_mutation_itself_cannot_be_registered():
    with pytest.raises(TypeError, match="abstract"):
        build_mutation_root(BaseMutation)


def test_abstract_intermediate_base_cannot_be_registered():
    class NullableMutation(BaseMutation, abstract=True):
        null = True

    with pytest.raises(TypeError, match="abstract"):
        build_mutation_root(NullableMutation)

    with pytest.raises(TypeError, match="abstract"):
        build_mutation_root(Echo, NullableMutation)


def test_only_mutation_classes_can_be_registered():
    with pytest.raises(TypeError):
        build_mutation_root(EchoPayload)


def test_graphql_name():
    assert Echo.graphql_name() == "echo"
    assert CreateRobot.graphql_name() == "createRobot"


def test_same_explicit_name_is_a_duplicate():
    class Whisper(BaseMutation):
        payload = EchoPayload
        name = "shout"

        @staticmethod
        def resolve(info: strawberry.Info) -> EchoPayload:
            return EchoPayload(message="whisper")

    class Yell(BaseMutation):
        payload = EchoPayload
        name = "shout"

        @staticmethod
        def resolve(info: strawberry.Info) -> EchoPayload:
            return EchoPayload(message="yell")

    with pytest.raises(ValueError, match="shout"):
        build_mutation_root(Whisper, Yell)


def test_explicit_name_clashing_with_derived_name_is_a_duplicate():
    class LoudEcho(BaseMutation):
        payload = EchoPayload
        name = "echo"

        @staticmethod
        def resolve(info: strawberry.Info) -> EchoPayload:
            return EchoPayload(message="ECHO")

    with pytest.raises(ValueError, match="echo"):
        build_mutation_root(Echo, LoudEcho)


def test_class_type_config_is_used_unless_root_overrides():
    built_types = []

    def recording_mutation(**kwargs):
        built_types.append(kwargs["graphql_type"])
        return strawberry.mutation(**kwargs)

    recording = MutationTypeConfig(object_type=strawberry.type, mutation=recording_mutation)

    class Configured(BaseMutation):
        payload = EchoPayload
        type_config = recording

        @staticmethod
        def resolve(info: strawberry.Info) -> EchoPayload:
            return EchoPayload(message="configured")

    schema = build_schema(Configured)

    assert built_types == [EchoPayload]
    result = schema.execute_sync("mutation { configured { message } }")
    assert result.data == {"configured": {"message": "configured"}}

    build_mutation_root(Configured, type_config=DEFAULT_TYPE_CONFIG)
    assert built_types == [EchoPayload]
