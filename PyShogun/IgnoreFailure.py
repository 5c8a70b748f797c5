"""
Decode a sequence, skipping the elements that fail to decode.

Consider this JSON:

    { "teams": [
        { "team": "Ferrari", "color": "Red", "country": "Italy" },
        { "team": "McLaren", "color": "Papaya", "country": "England" },
        { "team": "Alpine", "color": "Blue" }
    ] }

Decoding every team with a decode function that requires `country` fails on
Alpine. Decoding the array with DecodeIgnoringFailures returns Ferrari and
McLaren and logs that Alpine was skipped.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from PyShogun.DecodingEvents import DecodingEvents
from PyShogun.ShogunError import FormatCodingPath

if TYPE_CHECKING:
    from PyShogun.Decoder import Decoder, UnkeyedContainer

T = TypeVar('T')

def _get_log_level(name : str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING

skipped_element_log_level = _get_log_level(os.getenv('SHOGUN_SKIP_LOG_LEVEL', 'WARNING'))

def DecodeIgnoringFailures(container : UnkeyedContainer, decode_fn : Callable[[Decoder], T], events : DecodingEvents|None = None) -> list[T]:
    """
    Decode each remaining element of the container with decode_fn.

    Elements whose decode raises are logged, reported through the element_skipped
    signal and consumed, so the rest of the sequence is still decoded. The result
    keeps the source order and is never longer than the input.
    """
    events = events or container.events
    results : list[T] = []

    while not container.is_at_end:
        index = container.current_index
        try:
            results.append(container.decode(decode_fn))

        except Exception as e:
            path = container.coding_path + (index,)
            logging.log(skipped_element_log_level, f"Item skipped at {FormatCodingPath(path)}, error: {e}")
            if events:
                events.element_skipped.send(container, path=path, error=e)

            container.skip()

    return results
