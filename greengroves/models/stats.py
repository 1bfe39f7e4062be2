"""Dashboard, analytics and interaction payloads."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DashboardStats(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    total_users: int = Field(default=0, validation_alias=AliasChoices("total_users", "totalUsers"))
    total_views: int = Field(default=0, validation_alias=AliasChoices("total_views", "totalViews"))
    total_articles: int = Field(
        default=0, validation_alias=AliasChoices("total_articles", "totalArticles")
    )
    total_videos: int = Field(
        default=0, validation_alias=AliasChoices("total_videos", "totalVideos")
    )
    avg_rating: float = Field(default=0.0, validation_alias=AliasChoices("avg_rating", "avgRating"))
    monthly_growth: float = Field(
        default=0.0, validation_alias=AliasChoices("monthly_growth", "monthlyGrowth")
    )


class InteractionResult(BaseModel):
    """Response of the like/rating/view endpoints."""

    model_config = ConfigDict(extra="allow")

    success: bool = True
    message: str | None = None
    liked: bool | None = None
    rating: float | None = None
    views: int | None = None
    likes: int | None = None
    average_rating: float | None = None
    data: dict[str, Any] | None = None
