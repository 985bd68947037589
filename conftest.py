"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Sample design document snapshots
- Parsed component trees and style tables for pipeline tests
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from dotenv import load_dotenv

if TYPE_CHECKING:
    from compdoc.host import SnapshotHost
    from compdoc.node import ComponentSetNode
    from compdoc.tokens import StyleRegistry

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Snapshot Fixtures
# =============================================================================


@pytest.fixture
def button_snapshot() -> dict[str, Any]:
    """Exported document with a "Button/Primary" component set selected.

    The set has two variants; the second one ("State=Hover") is the
    designated default and is the only one with layout, fills and content.

    Returns:
        Snapshot dict in the exported camelCase shape.
    """
    return {
        "selection": [
            {
                "id": "1:0",
                "type": "COMPONENT_SET",
                "name": "Button/Primary",
                "description": "Set level description",
                "defaultVariantId": "1:2",
                "children": [
                    {
                        "id": "1:1",
                        "type": "COMPONENT",
                        "name": "State=Default",
                        "variantProperties": {"State": "Default"},
                        "layoutMode": "VERTICAL",
                        "fills": [
                            {"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1}}
                        ],
                        "children": [],
                    },
                    {
                        "id": "1:2",
                        "type": "COMPONENT",
                        "name": "State=Hover",
                        "description": "Primary call to action",
                        "variantProperties": {"State": "Hover"},
                        "layoutMode": "HORIZONTAL",
                        "paddingTop": 8,
                        "paddingRight": 16,
                        "paddingBottom": 8,
                        "paddingLeft": 16,
                        "itemSpacing": 8,
                        "primaryAxisAlignItems": "CENTER",
                        "counterAxisAlignItems": "CENTER",
                        "fills": [
                            {
                                "type": "SOLID",
                                "opacity": 0.5,
                                "color": {"r": 1, "g": 0, "b": 0},
                            }
                        ],
                        "fillStyleId": "S:brand",
                        "children": [
                            {
                                "id": "1:3",
                                "type": "INSTANCE",
                                "name": "Icon",
                                "mainComponent": {"id": "9:1", "name": "Icon/Cart"},
                                "children": [],
                            },
                            {
                                "id": "1:4",
                                "type": "TEXT",
                                "name": "Label",
                                "characters": "Buy now",
                                "textStyleId": "S:label",
                                "fontSize": 16,
                                "lineHeight": {"unit": "PIXELS", "value": 24},
                            },
                        ],
                    },
                ],
            }
        ],
        "styles": {
            "S:brand": {"name": "Color/Brand/Primary"},
            "S:label": {"name": "Text/Label/M"},
        },
    }


@pytest.fixture
def button_set(button_snapshot: dict[str, Any]) -> ComponentSetNode:
    """Parsed "Button/Primary" component set from ``button_snapshot``."""
    from compdoc.node import parse_node

    return parse_node(button_snapshot["selection"][0])


@pytest.fixture
def style_registry(button_snapshot: dict[str, Any]) -> StyleRegistry:
    """Style table matching ``button_snapshot``."""
    from compdoc.tokens import StyleRegistry

    return StyleRegistry(
        {style_id: style["name"] for style_id, style in button_snapshot["styles"].items()}
    )


@pytest.fixture
def snapshot_host(button_snapshot: dict[str, Any]) -> SnapshotHost:
    """Snapshot host over ``button_snapshot`` with an in-memory clipboard."""
    from compdoc.host import MemoryClipboard, SnapshotHost

    return SnapshotHost.from_dict(button_snapshot, clipboard=MemoryClipboard())
