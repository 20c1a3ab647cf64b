"""FailurePrompt Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FailurePrompt:
    """실패 시 사용자에게 보여줄 안내 문구.

    표시 자체는 호출자(UI)의 책임입니다.
    """

    title: str
    message: str
    offer_settings: bool = False
