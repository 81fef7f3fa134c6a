import os
from dataclasses import dataclass
from typing import Tuple


# Logging
LOG_LEVEL: str = os.environ.get("DEMOUI_LOG_LEVEL", "INFO").strip().upper() or "INFO"


# List screen data source
# Resource name looked up by the locator; an extra directory can be searched first.
ITEMS_RESOURCE_NAME: str = os.environ.get("DEMOUI_ITEMS_RESOURCE", "demo_items.json")
RESOURCE_DIR: str = os.environ.get("DEMOUI_RESOURCE_DIR", "").strip()
BUNDLED_RESOURCE_DIR: str = os.path.join(os.path.dirname(os.path.abspath(__file__)), "resources")
FALLBACK_ITEM_COUNT: int = 20
FALLBACK_TITLE_PREFIX: str = "Item "


# Window / navigation titles
WINDOW_TITLE: str = "Demo Controls"
LIST_TITLE: str = "List"
WINDOW_MIN_SIZE: Tuple[int, int] = (420, 640)


# Controls screen ranges and defaults
SLIDER_MIN: float = 0.0
SLIDER_MAX: float = 100.0
SLIDER_STEP: float = 1.0
SLIDER_DEFAULT: float = 50.0

QUANTITY_MIN: int = 1
QUANTITY_MAX: int = 10
QUANTITY_DEFAULT: int = 1

FRUITS: Tuple[str, ...] = ("Apple", "Banana", "Cherry", "Grape")
FRUIT_DEFAULT: str = "Apple"

PROGRESS_DEFAULT: float = 0.3
PROGRESS_STEP: float = 0.1
# QProgressBar works in integer units
PROGRESS_BAR_SCALE: int = 100

GREETING_FALLBACK_NAME: str = "there"


@dataclass
class SectionTitles:
    text_input: str = "Text & Input"
    toggles: str = "Toggles & Pickers"
    feedback: str = "Feedback"
    images_lists: str = "Images & Lists"
