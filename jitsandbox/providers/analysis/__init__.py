"""Analysis model interfaces."""

from jitsandbox.providers.analysis.base import AnalysisModel, ClassRepresentation, Member

__all__ = ["AnalysisModel", "ClassRepresentation", "Member"]
