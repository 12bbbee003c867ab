"""
Test Suite for the Bookshelf API

Test Organization:
- conftest.py: Shared fixtures (in-memory repository, client, sample data)
- test_graphql.py: Queries, mutations and relationship resolvers over HTTP
- test_repositories.py: In-memory repository behaviour
- test_mongo_repository.py: MongoDB repository against mocked collections
- test_config.py: Settings defaults, overrides and validation
- test_main.py: Root, health, CORS, GraphiQL and the lifespan

Running Tests:
    pip install -e ".[test]"
    pytest -v
"""
