from __future__ import annotations

from datetime import datetime
from typing import Optional

import msgspec

from .base import Count, TolerantStruct


# region Media

class MediaPublicMetrics(TolerantStruct):
    view_count: Optional[Count] = None


class MediaPlaybackMetrics(TolerantStruct):
    # shape shared by non_public_metrics, organic_metrics and promoted_metrics
    playback_0_count: Optional[Count] = None
    playback_25_count: Optional[Count] = None
    playback_50_count: Optional[Count] = None
    playback_75_count: Optional[Count] = None
    playback_100_count: Optional[Count] = None
    view_count: Optional[Count] = None


class Media(TolerantStruct):
    # media is keyed by media_key rather than id
    media_key: str
    type: str
    alt_text: Optional[str] = None
    duration_ms: Optional[Count] = None
    height: Optional[Count] = None
    non_public_metrics: Optional[MediaPlaybackMetrics] = None
    organic_metrics: Optional[MediaPlaybackMetrics] = None
    preview_image_url: Optional[str] = None
    promoted_metrics: Optional[MediaPlaybackMetrics] = None
    public_metrics: Optional[MediaPublicMetrics] = None
    url: Optional[str] = None
    width: Optional[Count] = None

# endregion

# region Poll


class PollOption(msgspec.Struct, frozen=True):
    position: int
    label: str
    votes: int = 0


class Poll(TolerantStruct):
    id: str
    options: tuple[PollOption, ...]
    duration_minutes: Optional[Count] = None
    end_datetime: Optional[datetime] = None
    voting_status: Optional[str] = None

# endregion
