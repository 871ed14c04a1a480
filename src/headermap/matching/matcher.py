"""Layered header matcher.

Maps raw user headers onto a schema catalog in three layers, stopping at
the first that succeeds:

1. Exact: normalized header equals a normalized canonical name (1.0)
2. Alias: normalized header equals a normalized alias (0.95)
3. Fuzzy: best similarity score across canonical names, aliases and
   halved description scores, if it reaches ``fuzzy_min_threshold``

Anything else is NO_MATCH. Ties in every layer go to the candidate seen
first in catalog order (insertion order), and within an entry to its
canonical name, then its aliases in order, then its description.

The matcher holds only immutable state derived at construction, so one
instance can be shared across threads as long as nobody mutates the
catalog entries or config afterwards.
"""

from __future__ import annotations

from typing import NamedTuple

from headermap.matching.classifier import classify
from headermap.matching.normalize import normalize
from headermap.matching.similarity import description_score, ratio
from headermap.models.config import MatchingConfig
from headermap.models.mapping import MappingAction, MappingResult, MatchType
from headermap.models.schema import SchemaCatalog, SchemaEntry

EXACT_CONFIDENCE = 1.0
ALIAS_CONFIDENCE = 0.95


class _PreparedEntry(NamedTuple):
    """Schema entry with its comparison strings normalized once."""

    entry: SchemaEntry
    name: str
    aliases: tuple[tuple[str, str], ...]  # (raw alias, normalized alias)
    description: str


class _Candidate(NamedTuple):
    entry: SchemaEntry
    target: str
    score: int


class HeaderMatcher:
    """Maps user column headers onto canonical schema columns.

    Usage::

        matcher = HeaderMatcher(catalog, MatchingConfig(fuzzy_min_threshold=20))
        result = matcher.map_single_header("totl biogas")
        ranked = matcher.top_matches("gas", 3)
    """

    def __init__(self, catalog: SchemaCatalog, config: MatchingConfig | None = None) -> None:
        self._catalog = catalog
        self._config = config or MatchingConfig()
        self._prepared: tuple[_PreparedEntry, ...] = tuple(
            _PreparedEntry(
                entry=entry,
                name=normalize(entry.canonical_name),
                aliases=tuple((alias, normalize(alias)) for alias in entry.aliases),
                description=normalize(entry.description),
            )
            for entry in catalog
        )

    @property
    def catalog(self) -> SchemaCatalog:
        return self._catalog

    @property
    def config(self) -> MatchingConfig:
        return self._config

    def map_headers(self, headers: list[str]) -> list[MappingResult]:
        """Map every header, returning one result per header in input order."""
        return [self.map_single_header(header) for header in headers]

    def map_single_header(self, header: str) -> MappingResult:
        """Map one raw header through the exact, alias and fuzzy layers.

        Args:
            header: Raw user-supplied column header.

        Returns:
            MappingResult; NO_MATCH with MANUAL_MAP when no layer matched.
        """
        normalized = normalize(header)
        if not normalized:
            return self._no_match(header)

        for prepared in self._prepared:
            if prepared.name == normalized:
                return MappingResult(
                    user_column=header,
                    canonical_column=prepared.entry.canonical_name,
                    confidence=EXACT_CONFIDENCE,
                    match_type=MatchType.EXACT,
                    match_details=(
                        f"Exact match to canonical name '{prepared.entry.canonical_name}'"
                    ),
                    recommended_action=MappingAction.AUTO_MAP,
                )

        for prepared in self._prepared:
            for alias, normalized_alias in prepared.aliases:
                if normalized_alias == normalized:
                    return MappingResult(
                        user_column=header,
                        canonical_column=prepared.entry.canonical_name,
                        confidence=ALIAS_CONFIDENCE,
                        match_type=MatchType.ALIAS,
                        match_details=f"Matched alias: '{alias}'",
                        recommended_action=MappingAction.AUTO_MAP,
                    )

        fuzzy = self._best_fuzzy_match(header, normalized)
        if fuzzy is not None:
            return fuzzy

        return self._no_match(header)

    def top_matches(self, header: str, n: int = 3) -> list[MappingResult]:
        """Rank schema entries by name/alias similarity to a header.

        Each entry is scored by the best ratio over its canonical name and
        aliases. Description scores are not used here, unlike the fuzzy
        layer of :meth:`map_single_header`. Entries below
        ``fuzzy_min_threshold`` are dropped; the rest are sorted by
        confidence (stable, so catalog order breaks ties) and truncated.

        Args:
            header: Raw user-supplied column header.
            n: Maximum number of results.

        Returns:
            Up to ``n`` FUZZY results, highest confidence first.

        Raises:
            ValueError: If ``n`` is negative.
        """
        if n < 0:
            msg = f"n must be >= 0, got {n}"
            raise ValueError(msg)

        normalized = normalize(header)
        candidates: list[MappingResult] = []

        for prepared in self._prepared:
            # Blank names and aliases never count as candidates
            canonical_score = ratio(normalized, prepared.name) if prepared.name else 0

            best_alias_score = 0
            best_alias = ""
            for alias, normalized_alias in prepared.aliases:
                if not normalized_alias:
                    continue
                alias_score = ratio(normalized, normalized_alias)
                if alias_score > best_alias_score:
                    best_alias_score = alias_score
                    best_alias = alias

            best_score = max(canonical_score, best_alias_score)
            if best_score < self._config.fuzzy_min_threshold:
                continue

            target = (
                best_alias
                if best_alias_score > canonical_score
                else prepared.entry.canonical_name
            )
            confidence = best_score / 100.0
            candidates.append(
                MappingResult(
                    user_column=header,
                    canonical_column=prepared.entry.canonical_name,
                    confidence=confidence,
                    match_type=MatchType.FUZZY,
                    match_details=f"Matched against '{target}' (score: {best_score})",
                    recommended_action=classify(
                        confidence, prepared.entry.required, self._config
                    ),
                )
            )

        candidates.sort(key=lambda r: r.confidence, reverse=True)
        return candidates[:n]

    def _best_fuzzy_match(self, header: str, normalized: str) -> MappingResult | None:
        """Score every name, alias and description; keep the first best."""
        best: _Candidate | None = None

        for prepared in self._prepared:
            entry = prepared.entry
            scored = [_Candidate(entry, entry.canonical_name, ratio(normalized, prepared.name))]
            scored.extend(
                _Candidate(entry, alias, ratio(normalized, normalized_alias))
                for alias, normalized_alias in prepared.aliases
            )
            scored.append(
                _Candidate(
                    entry,
                    f"description: {entry.description}",
                    description_score(normalized, prepared.description),
                )
            )
            for candidate in scored:
                # Strict comparison keeps the earliest candidate on ties
                if best is None or candidate.score > best.score:
                    best = candidate

        if best is None or best.score < self._config.fuzzy_min_threshold:
            return None

        confidence = best.score / 100.0
        return MappingResult(
            user_column=header,
            canonical_column=best.entry.canonical_name,
            confidence=confidence,
            match_type=MatchType.FUZZY,
            match_details=f"Fuzzy match against '{best.target}' (score: {best.score})",
            recommended_action=classify(confidence, best.entry.required, self._config),
        )

    @staticmethod
    def _no_match(header: str) -> MappingResult:
        return MappingResult(
            user_column=header,
            canonical_column="",
            confidence=0.0,
            match_type=MatchType.NO_MATCH,
            match_details="No suitable match found",
            recommended_action=MappingAction.MANUAL_MAP,
        )
