"""Pydantic response models for the API."""

from .common import AlgorithmInfo, BeatInfo, CamelModel, UserCard
from .recordings import TrendingRecording, TrendingResponse
from .users import RecentActivityOut, RisingTalentResponse, RisingUser

__all__ = [
    "AlgorithmInfo",
    "BeatInfo",
    "CamelModel",
    "RecentActivityOut",
    "RisingTalentResponse",
    "RisingUser",
    "TrendingRecording",
    "TrendingResponse",
    "UserCard",
]
