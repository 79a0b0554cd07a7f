from .collector import FeedbackCollector


__all__ = ["FeedbackCollector"]
