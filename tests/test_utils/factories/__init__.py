from tests.test_utils.factories.core import SAMPLE_FINGERPRINT, BookmarkStateFactory, CheckResultFactory
from tests.test_utils.factories.detection import SAMPLE_HTML, SAMPLE_URL, FeedItemFactory, FetchResultFactory

__all__ = [
    "SAMPLE_FINGERPRINT",
    "SAMPLE_HTML",
    "SAMPLE_URL",
    "BookmarkStateFactory",
    "CheckResultFactory",
    "FeedItemFactory",
    "FetchResultFactory",
]
