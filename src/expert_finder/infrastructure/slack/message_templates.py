"""Slack message templates for expert lookup replies."""

from __future__ import annotations

from expert_finder.application.services.expert_lookup_service import (
    LookupOutcome,
    LookupResult,
)

_ALL_CAPS_DOMAINS = frozenset({"bav", "vkyc", "ckyc", "poc"})
_PUNCHLINES: dict[str, str] = {
    "wealth_tech": "He knows it all about Wealth Tech! 💼✨",
    "vkyc": "He can handle VKYC in his sleep 😴✅",
    "e_sign": "The eSign guru, eSigning deals faster than you can blink! 🖋️⚡",
    "lending": "Lending expert who's got your back (and your loan)! 💸🤝",
    "bank_statement_analysis": "Reads bank statements like bedtime stories 📖💰",
    "gig_economy": "Master of the gig hustle and flow 🎤💼",
    "bav": "Verifying accounts faster than a bank teller! 🏦⚡",
    "ckyc": "CKYC champ with the Midas touch ✨🛠️",
    "poc": "Proof of Concept? He's the proof you need! ✔️🔍",
}
DEFAULT_PUNCHLINE = "A Subject Matter Expert you can always count on! 🚀"


def prettify_domain(domain_key: str) -> str:
    """Render a directory key for display, e.g. `wealth_tech` -> `Wealth Tech`."""

    if domain_key.lower() in _ALL_CAPS_DOMAINS:
        return domain_key.upper()
    return " ".join(word[:1].upper() + word[1:] for word in domain_key.split("_"))


def punchline_for(domain_key: str) -> str:
    return _PUNCHLINES.get(domain_key, DEFAULT_PUNCHLINE)


def build_expert_found_message(*, domain_key: str, expert: str) -> str:
    """Build multi-line reply naming the expert for a matched domain."""

    return (
        f":sparkles: *Subject Matter Expert for* _{prettify_domain(domain_key)}_ :rocket:\n\n"
        f"*{expert}*\n\n"
        f"_{punchline_for(domain_key)}_\n\n"
        "Need help? Just ping them! :speech_balloon:"
    )


def build_not_found_message(*, query: str) -> str:
    return (
        f"😕 Hmm, I couldn't find a Subject Matter Expert for *{query}*. "
        "Try another domain or check spelling."
    )


def build_empty_query_message() -> str:
    return "Please provide a domain name."


def build_internal_error_message() -> str:
    return "Sorry, the expert directory is unavailable right now. Please try again later."


def build_outcome_message(result: LookupResult) -> str:
    """Map a lookup result to the reply text shown in Slack."""

    if result.outcome is LookupOutcome.MATCH:
        assert result.domain_key is not None
        assert result.expert is not None
        return build_expert_found_message(domain_key=result.domain_key, expert=result.expert)
    if result.outcome is LookupOutcome.NO_MATCH:
        return build_not_found_message(query=result.query)
    if result.outcome is LookupOutcome.EMPTY_QUERY:
        return build_empty_query_message()
    return build_internal_error_message()
