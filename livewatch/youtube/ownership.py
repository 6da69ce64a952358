import re
from typing import Optional

from .models import OwnershipVerdict
from .signals import channel_id_field, string_field

# Checked in order; the first field present on the page decides.
OWNER_ID_FIELDS = ["videoOwnerChannelId", "ownerChannelId", "channelId"]
OWNER_NAME_FIELDS = ["ownerChannelName", "author"]


def normalize_name(name: str) -> str:
    return re.sub(r"\s+", "", name).lower()


def names_match(page_name: str, display_name: str) -> bool:
    # NOTE: substring matching also accepts short names contained in longer
    # ones ("RP" inside "SkylifeRP").
    a, b = normalize_name(page_name), normalize_name(display_name)
    if not a or not b:
        return False
    return a == b or a in b or b in a


def verify_ownership(body: str, expected_channel_id: Optional[str], display_name: Optional[str]) -> OwnershipVerdict:
    """Confirm that the live content on a page is hosted by the target channel.

    Exact channel id comparison is used when the canonical id is known; the
    page's author name is compared against the display name otherwise. Pages
    that offer neither signal are rejected.
    """
    if expected_channel_id:
        for field in OWNER_ID_FIELDS:
            actual = channel_id_field(body, field)
            if actual is None:
                continue
            if actual == expected_channel_id:
                return OwnershipVerdict(True, f"{field}_match")
            return OwnershipVerdict(False, f"{field}_mismatch:{actual}")

    if display_name:
        for field in OWNER_NAME_FIELDS:
            page_name = string_field(body, field)
            if not page_name:
                continue
            if names_match(page_name, display_name):
                return OwnershipVerdict(True, f"name_match:{page_name}")
            return OwnershipVerdict(False, f"name_mismatch:{page_name}")

    return OwnershipVerdict(False, "no_ownership_signal")
