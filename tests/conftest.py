"""Shared fixtures for graphql_to_ts tests."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from graphql_to_ts.codegen.core.config import ConversionOptions
from graphql_to_ts.codegen.languages.typescript import TypeScriptGenerator

FIXED_TIMESTAMP = "2024-01-01T00:00:00.000Z"

HEADER = (
    "/**\n"
    " * Auto-generated GraphQL TypeScript definitions\n"
    f" * Generated on: {FIXED_TIMESTAMP}\n"
    " */"
)

SAMPLE_SCHEMA = '''
"""A point in time"""
scalar DateTime

scalar Money

"Account role"
enum Role {
  "Full access"
  ADMIN
  USER
}

interface Node {
  id: ID!
}

"A registered user"
type User implements Node {
  "Unique id"
  id: ID!
  name: String
  role: Role!
  tags: [String!]!
  friends: [User]
  balance: Money
}

type Post implements Node {
  id: ID!
  author: User!
}

union SearchResult = User | Post

input NewUser {
  name: String!
  role: Role
}

type Query {
  user(id: ID!): User
  search(term: String!): [SearchResult!]!
}

type Mutation {
  createUser(input: NewUser!): User!
}
'''


@pytest.fixture
def sample_schema() -> str:
    return SAMPLE_SCHEMA


@pytest.fixture
def make_generator():
    def _make(**options) -> TypeScriptGenerator:
        return TypeScriptGenerator(ConversionOptions(**options), clock=lambda: FIXED_TIMESTAMP)

    return _make


@pytest.fixture
def console_buffer():
    buffer = io.StringIO()
    return Console(file=buffer, width=300, color_system=None), buffer
