"""Canonical enum values for the CRM schema."""

from __future__ import annotations

import enum


class DealStatus(str, enum.Enum):
    NEW = "New"
    QUALIFIED = "Qualified"
    PROPOSAL = "Proposal"
    WON = "Won"
    LOST = "Lost"
