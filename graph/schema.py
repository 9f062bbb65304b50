import strawberry
from strawberry.fastapi import GraphQLRouter

from .context import get_context
from .errors import format_error
from .mutation import Mutation
from .query import Query

schema = strawberry.Schema(query=Query, mutation=Mutation)


class FilmdbGraphQLRouter(GraphQLRouter):
    async def process_result(self, request, result):
        response = {"data": result.data}
        if result.errors:
            response["errors"] = [format_error(error) for error in result.errors]
        if result.extensions:
            response["extensions"] = result.extensions
        return response


def create_graphql_router() -> GraphQLRouter:
    return FilmdbGraphQLRouter(schema, context_getter=get_context)
