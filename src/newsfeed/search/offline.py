"""Built-in articles served while the service is offline."""

from newsfeed.data import Article

EXAMPLE_ARTICLES: tuple[Article, ...] = (
    Article(
        title="Apple unveils new MacBook lineup",
        description="Apple announced refreshed laptops with faster chips and longer battery life.",
        url="https://example.com/news/apple-macbook-lineup",
        published_at="2024-09-10T08:00:00Z",
    ),
    Article(
        title="Apple shares climb after earnings beat",
        description="Investors cheered stronger than expected iPhone and services revenue.",
        url="https://example.com/news/apple-earnings",
        published_at="2024-09-09T20:30:00Z",
    ),
    Article(
        title="Orchard harvest season begins early",
        description="Growers report an early apple harvest after a warm summer.",
        url="https://example.com/news/orchard-harvest",
        published_at="2024-09-08T14:15:00Z",
    ),
    Article(
        title="Tesla expands charging network in Europe",
        description="The carmaker opened hundreds of new Supercharger stations.",
        url="https://example.com/news/tesla-charging",
        published_at="2024-09-07T11:45:00Z",
    ),
    Article(
        title="Central bank holds interest rates steady",
        description="Policy makers signalled patience as inflation cools.",
        url="https://example.com/news/rates-steady",
        published_at="2024-09-05T16:00:00Z",
    ),
)


class OfflineFixtures:
    """Serve a fixed article set in place of the remote provider.

    Args:
        articles: Articles to serve (default: EXAMPLE_ARTICLES). Must be non-empty.
    """

    def __init__(self, articles: tuple[Article, ...] = EXAMPLE_ARTICLES) -> None:
        if not articles:
            raise ValueError("Offline fixtures require at least one article")
        self._articles = tuple(articles)

    def articles(self) -> tuple[Article, ...]:
        return self._articles
