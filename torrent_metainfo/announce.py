"""Tracker tiers from 'announce' / 'announce-list'."""

import logging
import random

from torrent_metainfo.bencode import text

logger = logging.getLogger(__name__)


def build_announce_tiers(announce, announce_list, rng: random.Random | None = None) -> tuple[tuple[str, ...], ...]:
    """Build ordered tracker tiers.

    A non-empty 'announce-list' is authoritative: tiers keep their declared
    order and the URLs inside each tier are shuffled once. Without it the
    single 'announce' URL becomes the only tier. No trackers gives ().
    """
    if rng is None:
        rng = random.Random()

    if isinstance(announce_list, list) and announce_list:
        tiers: list[tuple[str, ...]] = []
        for i, declared in enumerate(announce_list):
            if not isinstance(declared, list):
                logger.debug("Skipping announce-list tier %d: not a list", i)
                continue
            urls = [url for url in (text(v) for v in declared) if url]
            if not urls:
                logger.debug("Skipping empty announce-list tier %d", i)
                continue
            rng.shuffle(urls)
            tiers.append(tuple(urls))
        if tiers:
            return tuple(tiers)

    url = text(announce)
    if url:
        return ((url,),)
    return ()
