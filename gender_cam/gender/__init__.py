"""Gender classifiers: Caffe network and rule-based heuristic."""

from .heuristic import HeuristicGenderClassifier, calculate_male_score, extract_features
from .network import NetGenderClassifier

__all__ = [
    "HeuristicGenderClassifier",
    "NetGenderClassifier",
    "calculate_male_score",
    "extract_features",
]
