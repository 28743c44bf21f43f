# src/registry/domains.py
from __future__ import annotations

import logging

from src.adapters import (
    ajio,
    amazon,
    bewakoof,
    flipkart,
    hm,
    libas,
    myntra,
    shoppers_stop,
    souled_store,
    storefronts,
    veromoda,
)
from src.adapters.base import SiteAdapter

logger = logging.getLogger(__name__)

# Table order matters for the loose fallback match: first hit wins.
_ADAPTERS_IN_ORDER: list[SiteAdapter] = [
    amazon.ADAPTER,
    flipkart.ADAPTER,
    myntra.ADAPTER,
    souled_store.ADAPTER,
    ajio.ADAPTER,
    hm.ADAPTER,
    storefronts.HOUSE_OF_RARE,
    storefronts.AACHHO,
    storefronts.SAADAA,
    storefronts.HOUSE_OF_CHIKANKARI,
    storefronts.OFFDUTY,
    storefronts.FREAKINS,
    libas.ADAPTER,
    bewakoof.ADAPTER,
    storefronts.W_FOR_WOMAN,
    shoppers_stop.ADAPTER,
    veromoda.ADAPTER,
]


def _build_table(adapters: list[SiteAdapter]) -> dict[str, SiteAdapter]:
    table: dict[str, SiteAdapter] = {}
    for adapter in adapters:
        for domain in adapter.domains:
            if domain in table:
                raise ValueError(f"Domain {domain} registered twice ({table[domain].name}, {adapter.name})")
            table[domain] = adapter
    return table


DOMAIN_ADAPTERS: dict[str, SiteAdapter] = _build_table(_ADAPTERS_IN_ORDER)


def lookup(domain: str | None) -> SiteAdapter | None:
    """Adapter for a normalized domain.

    Exact key first, then any key contained in the domain or matching it as a
    subdomain suffix. Containment is plain substring, so ``myhm.com`` resolves to ``hm.com``.
    """
    if not domain:
        return None
    domain = domain.lower()
    adapter = DOMAIN_ADAPTERS.get(domain)
    if adapter is not None:
        return adapter
    for key, candidate in DOMAIN_ADAPTERS.items():
        if key in domain or domain.endswith("." + key):
            logger.debug(f"Domain {domain} matched registry key {key}")
            return candidate
    return None


def requires_rendering(domain: str | None) -> bool:
    adapter = lookup(domain)
    if adapter is None:
        return True
    return adapter.requires_rendering


def supported_domains() -> list[str]:
    return list(DOMAIN_ADAPTERS)
