from tests.test_utils.fakes.detection import CountingWatcher, FailingOnceWatcher, FakeFetcher, SequenceChecker, StallingChecker

__all__ = ["CountingWatcher", "FailingOnceWatcher", "FakeFetcher", "SequenceChecker", "StallingChecker"]
