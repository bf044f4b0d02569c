"""
Shared test fixtures and configuration for the gql_automock test suite.
"""

from pathlib import Path

import pytest

from gql_automock import MockDataGenerator, TypeDescriptor
from gql_automock.logging import cleanup_logging
from gql_automock.schema import FieldDescriptor

WIDGET_TYPE = """
type Widget {
  id: ID!
  name: String!
}
"""


@pytest.fixture
def widgets_schema() -> str:
    """Schema whose Query returns a list of widgets."""
    return "type Query { getWidgets: [Widget!]! getWidget: Widget }\n" + WIDGET_TYPE


@pytest.fixture
def portfolio_schema() -> str:
    """A richer schema with every root operation kind."""
    return """
    interface Node { id: ID! }

    enum Currency { USD EUR }

    union SearchResult = Portfolio | Holding

    input PortfolioInput { title: String }

    type Portfolio implements Node {
      id: ID!
      ownerName: String
      ownerEmail: String
      createdDate: String
      totalAmount: Float
      holdingCount: Int
      active: Boolean
      currency: Currency
      holdings: [Holding]
    }

    type Holding {
      symbol: String
      price: Float
    }

    type Query {
      getPortfolio: Portfolio
      listPortfolios: [Portfolio]
      search: [SearchResult]
      currencies: [Currency!]!
      holdingCount: Int
    }

    type Mutation {
      createPortfolio(input: PortfolioInput): Portfolio!
    }

    type Subscription {
      holdingUpdated: Holding
    }
    """


@pytest.fixture
def scalar_type() -> TypeDescriptor:
    """A type using the base scalar names directly, as a catalog never renders them."""
    return TypeDescriptor(
        name="Reading",
        fields=(
            FieldDescriptor("label", "String"),
            FieldDescriptor("count", "Int"),
            FieldDescriptor("ratio", "Float"),
            FieldDescriptor("flag", "Boolean"),
            FieldDescriptor("ref", "ID"),
            FieldDescriptor("scores", "Int[]"),
            FieldDescriptor("owner", "User"),
        ),
    )


@pytest.fixture
def generator() -> MockDataGenerator:
    """Seeded generator for reproducible values."""
    return MockDataGenerator(seed=1234)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with an empty home and no settings env vars."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for var in ("LOG_LEVEL", "LOG_FILE", "LOG_FORMAT", "STRUCTURED_LOGS", "SEED", "LOCALE"):
        monkeypatch.delenv(f"GQL_AUTOMOCK_{var}", raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop any handlers a test installed on the package logger."""
    yield
    cleanup_logging()
