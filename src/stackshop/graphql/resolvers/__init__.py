"""Resolver package for the GraphQL schema.

Each module holds the resolvers for one entity; root Query/Mutation fields
and relation fields on the types import them lazily.
"""
