"""Validation schema for 500 rules configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, validator

from .avondale import MAX_BID_TRICKS, MIN_BID_TRICKS


class AuctionConfig(BaseModel):
    min_winning_tricks: int = Field(
        7,
        ge=MIN_BID_TRICKS,
        le=MAX_BID_TRICKS,
        description="Lowest trick level that can win the auction; anything less forces a redeal.",
    )
    inkle_enabled: bool = Field(True, description="Whether the first two bidders may inkle at six.")


class ScoringConfig(BaseModel):
    slam_floor: int = Field(250, ge=0, description="Minimum award for a contract that takes all ten tricks.")
    opponent_points_per_trick: int = Field(10, ge=0, description="Points the defenders earn per trick taken.")


class GameConfig(BaseModel):
    win_score: int = Field(500, description="Score at or above which a team wins.")
    lose_score: int = Field(-500, description="Score at or below which a team loses.")

    @validator("win_score")
    def validate_win_score(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Winning score must be positive.")
        return value

    @validator("lose_score")
    def validate_lose_score(cls, value: int) -> int:
        if value >= 0:
            raise ValueError("Losing score must be negative.")
        return value


class RuleSet(BaseModel):
    auction: AuctionConfig = Field(default_factory=AuctionConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    game: GameConfig = Field(default_factory=GameConfig)


DEFAULT_RULES = RuleSet()
