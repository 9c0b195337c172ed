"""GraphQL schema"""

import strawberry
from strawberry.fastapi import GraphQLRouter
from starlette.requests import Request

from robot_service.core.config import get_settings
from robot_service.data.repository import get_repository
from robot_service.schema.types import Robot
from robot_service.schema.queries import Query
from robot_service.schema.mutations import Mutation


# Create Federation schema
schema = strawberry.federation.Schema(
    query=Query,
    mutation=Mutation,
    types=[Robot]
)


async def get_context(request: Request):
    """
    Create context for each GraphQL request.
    The repository is shared so mutations are visible to later requests.
    """
    return {
        "request": request,
        "repository": get_repository(),
    }


def create_graphql_router() -> GraphQLRouter:
    """Create GraphQL router for FastAPI"""
    return GraphQLRouter(
        schema,
        graphql_ide="graphiql" if get_settings().graphiql else None,
        context_getter=get_context,
    )


__all__ = ["schema", "get_context", "create_graphql_router", "Robot", "Query", "Mutation"]
