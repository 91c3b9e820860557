"""External prediction model adapter."""

from footwatch.boundary.ml.model_client import PredictionModelClient

__all__ = ["PredictionModelClient"]
