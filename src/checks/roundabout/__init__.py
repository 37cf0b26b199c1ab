from checks.roundabout.collector import collect
from checks.roundabout.classifier import Classification, classify, same_feature

__all__ = ["collect", "Classification", "classify", "same_feature"]
