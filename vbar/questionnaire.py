"""The VBAR work-relationship questionnaire.

Based on the amended VBAR bill (*Verduidelijking Beoordeling
Arbeidsrelaties en Rechtsvermoeden*) as described in the progress letter of
27 March 2025.  Three groups of indicators are weighed against each other:

* **W** -- *werkgeversgezag* (employer authority): indicators of an
  employment relationship.
* **Z** -- *zelfstandigheid* (independence) in performing the work.
* **OP** -- *ondernemerschap* (entrepreneurship) of the worker.

W counts towards the primary bucket; Z and OP together form the secondary
bucket.  Within each group the first item weighs 2.0, the next two 1.5 and
the rest 1.0.  Question texts are kept in the original Dutch.
"""

from __future__ import annotations

from vbar.engine import new_answer_store, set_answer
from vbar.models import (
    AnswerStore,
    AnswerValue,
    BucketKind,
    Category,
    OutcomeState,
    Questionnaire,
)

# ---------------------------------------------------------------------------
# Questionnaire definition
# ---------------------------------------------------------------------------

VBAR_QUESTIONNAIRE = Questionnaire(
    categories=(
        Category(
            name="W",
            kind=BucketKind.PRIMARY,
            questions=(
                "De werkgevende is bevoegd om aanwijzingen en instructies te geven over de "
                "wijze waarop de werkende de werkzaamheden moet uitvoeren en de werkende "
                "moet deze ook opvolgen.",
                "De werkgevende heeft de mogelijkheid om de werkzaamheden van de werkende "
                "te controleren en is bevoegd om op basis daarvan in te grijpen.",
                "De werkzaamheden worden verricht binnen het organisatorisch kader van de "
                "organisatie van de werkgevende.",
                "De werkzaamheden hebben een structureel karakter binnen de organisatie.",
                "Werkzaamheden worden zij-aan-zij verricht met werknemers die soortgelijke "
                "werkzaamheden verrichten.",
            ),
            weights=(2.0, 1.5, 1.5, 1.0, 1.0),
        ),
        Category(
            name="Z",
            kind=BucketKind.SECONDARY,
            questions=(
                "De financiële risico’s en resultaten van de werkzaamheden liggen bij de "
                "werkende.",
                "Bij het verrichten van de werkzaamheden is de werkende zelf verantwoordelijk "
                "voor gereedschap, hulpmiddelen en materialen.",
                "De werkende is in het bezit van een specifieke opleiding, werkervaring, "
                "kennis of vaardigheden, die in de organisatie van de werkgevende niet "
                "structureel aanwezig is.",
                "De werkende treedt tijdens de werkzaamheden zelfstandig naar buiten.",
                "Er is sprake van een korte duur van de opdracht en/of een beperkt aantal "
                "uren per week.",
            ),
            weights=(2.0, 1.5, 1.5, 1.0, 1.0),
        ),
        Category(
            name="OP",
            kind=BucketKind.SECONDARY,
            questions=(
                "De werkende heeft meerdere opdrachtgevers per jaar.",
                "De werkende besteedt tijd en/of geld aan het verwerven van een reputatie "
                "en het vinden van nieuwe klanten of opdrachtgevers.",
                "De werkende heeft bedrijfsinvesteringen van enige omvang.",
                "De werkende gedraagt zich administratief als zelfstandig ondernemer: is "
                "ingeschreven bij de KVK, is btw-ondernemer en/of heeft recht op de fiscale "
                "voordelen van het ondernemerschap (zoals ondernemersfaciliteiten).",
            ),
            weights=(2.0, 1.5, 1.5, 1.0),
        ),
    )
)

# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

ANSWER_LABELS: dict[AnswerValue, str] = {
    AnswerValue.YES: "Ja",
    AnswerValue.PARTIAL: "Gedeeltelijk",
    AnswerValue.NO: "Nee",
}

# One-letter codes for typing answers on the command line.
ANSWER_CODES: dict[str, AnswerValue] = {
    "j": AnswerValue.YES,
    "g": AnswerValue.PARTIAL,
    "n": AnswerValue.NO,
    "-": AnswerValue.UNANSWERED,
}


def answers_from_codes(questionnaire: Questionnaire, codes: str) -> AnswerStore:
    """Build an answer store from a code string such as ``"jjgnn nnnnn -n-n"``.

    One code per question, in questionnaire order; whitespace is ignored so
    categories can be grouped for readability.  ``-`` leaves a question
    unanswered.
    """
    compact = "".join(codes.split()).lower()
    expected = questionnaire.total_questions
    if len(compact) != expected:
        raise ValueError(f"expected {expected} answer codes, got {len(compact)}")

    store = new_answer_store(questionnaire)
    pos = 0
    for cat_index, cat in enumerate(questionnaire.categories):
        for q_index in range(len(cat.questions)):
            code = compact[pos]
            pos += 1
            if code not in ANSWER_CODES:
                raise ValueError(
                    f"unknown answer code {code!r} at position {pos}; "
                    f"use one of {', '.join(ANSWER_CODES)}"
                )
            value = ANSWER_CODES[code]
            if value.is_answered:
                store = set_answer(store, cat_index, q_index, value)
    return store


def bucket_label(questionnaire: Questionnaire, kind: BucketKind) -> str:
    """Display label for a bucket, e.g. ``"Z+OP"``."""
    return "+".join(c.name for c in questionnaire.categories if c.kind == kind)


# ---------------------------------------------------------------------------
# Verdict texts and sources (shared across CLI and charts)
# ---------------------------------------------------------------------------

VERDICT_TITLE: dict[OutcomeState, str] = {
    OutcomeState.INSUFFICIENT_DATA: "Not enough answers",
    OutcomeState.LEANS_EMPLOYMENT: "Leans towards employment",
    OutcomeState.UNDETERMINED: "Undetermined",
    OutcomeState.LEANS_SELF_EMPLOYMENT: "Leans towards self-employment",
}

VERDICT_TEXT: dict[OutcomeState, str] = {
    OutcomeState.INSUFFICIENT_DATA: "Nog te weinig vragen beantwoord",
    OutcomeState.LEANS_EMPLOYMENT: "Let op! Waarschijnlijk sprake van een dienstverband.",
    OutcomeState.UNDETERMINED: "We twijfelen nog..",
    OutcomeState.LEANS_SELF_EMPLOYMENT: (
        "Prima! Waarschijnlijk geen sprake van een dienstverband."
    ),
}

SOURCES: list[tuple[str, str]] = [
    (
        "Voortgangsbrief werken met en als zelfstandige(n) 27 maart 2025",
        "https://open.overheid.nl/documenten/1ee9a35b-b8a8-48b5-a3ff-79134b224647/file",
    ),
    (
        "Wijziging van Boek 7 van het Burgerlijk Wetboek in verband met het "
        "verduidelijken van wanneer sprake is van werken in dienst van een ander in "
        "de zin van artikel 610 van Boek 7 van het Burgerlijk Wetboek en het invoeren "
        "van een rechtsvermoeden",
        "https://wetgevingskalender.overheid.nl/Regeling/WGK014517/Download/"
        "e12fc78d-ac0b-471b-8f65-378f130d439b_1.pdf",
    ),
    ("Broncode berekening", "https://github.com/mathijs-b2m/zzp-vbar"),
]

INSTRUCTIONS = (
    "Beoordeel een werkrelatie.\n\n"
    "This assessment is based on the amended VBAR bill of 27 March 2025. "
    "It weighs indicators of employer authority (W) against indicators of "
    "independence (Z) and entrepreneurship (OP).\n\n"
    "Answer each statement with:\n"
    "  j = Ja   g = Gedeeltelijk   n = Nee   (Enter to skip)\n\n"
    "At least half of the 14 statements must be answered for a verdict. "
    "Nothing you enter is stored."
)
