"""Concept hierarchies and mappings answered through transitive closure.

Only the structure of the relations is kept: concepts are any hashable
identifiers (usually IRIs) and the graph records which relation links them.
Plain ``broader``/``narrower`` links count one hop; their ``*_transitive``
variants are followed to any depth. ``related`` is symmetric and one hop,
while ``exact_match`` is symmetric and transitive.
"""

import logging
from collections.abc import Hashable
from enum import StrEnum

from chronometry.closure import successors_from_pairs, transitive_closure
from chronometry.errors import require

logger = logging.getLogger(__name__)


class ConceptRelation(StrEnum):
    BROADER = "broader"
    NARROWER = "narrower"
    BROADER_TRANSITIVE = "broader_transitive"
    NARROWER_TRANSITIVE = "narrower_transitive"
    RELATED = "related"
    EXACT_MATCH = "exact_match"


class ConceptGraph:
    """Directed, relation-labelled links between concepts."""

    def __init__(self) -> None:
        self._links: dict[ConceptRelation, list[tuple[Hashable, Hashable]]] = {
            relation: [] for relation in ConceptRelation
        }

    def add(self, relation: ConceptRelation | str, source: Hashable, target: Hashable) -> "ConceptGraph":
        """Link ``source`` to ``target`` through ``relation``.

        Raises:
            ValueError: If relation is not one of ConceptRelation
        """
        require(relation, "relation", "add concept link")
        require(source, "source", "add concept link")
        require(target, "target", "add concept link")
        try:
            relation = ConceptRelation(relation)
        except ValueError:
            valid = ", ".join(r.value for r in ConceptRelation)
            raise ValueError(
                f"Unknown concept relation: {relation!r}\n"
                f"Valid relations: {valid}"
            ) from None
        self._links[relation].append((source, target))
        logger.debug("linked %s -[%s]-> %s", source, relation, target)
        return self

    def broader_concepts(self, concept: Hashable) -> list[Hashable]:
        """Direct ``broader`` concepts plus every ``broader_transitive`` ancestor."""
        return self._hierarchy(concept, ConceptRelation.BROADER, ConceptRelation.BROADER_TRANSITIVE)

    def narrower_concepts(self, concept: Hashable) -> list[Hashable]:
        """Direct ``narrower`` concepts plus every ``narrower_transitive`` descendant."""
        return self._hierarchy(concept, ConceptRelation.NARROWER, ConceptRelation.NARROWER_TRANSITIVE)

    def related_concepts(self, concept: Hashable) -> list[Hashable]:
        require(concept, "concept", "get related concepts")
        successors = successors_from_pairs(self._links[ConceptRelation.RELATED], symmetric=True)
        return transitive_closure(concept, successors, transitive=False)

    def exact_match_concepts(self, concept: Hashable) -> list[Hashable]:
        require(concept, "concept", "get exact match concepts")
        successors = successors_from_pairs(self._links[ConceptRelation.EXACT_MATCH], symmetric=True)
        return transitive_closure(concept, successors)

    def has_broader_concept(self, child: Hashable, parent: Hashable) -> bool:
        return child is not None and parent is not None and parent in self.broader_concepts(child)

    def has_narrower_concept(self, parent: Hashable, child: Hashable) -> bool:
        return parent is not None and child is not None and child in self.narrower_concepts(parent)

    def has_related_concept(self, left: Hashable, right: Hashable) -> bool:
        return left is not None and right is not None and right in self.related_concepts(left)

    def has_exact_match_concept(self, left: Hashable, right: Hashable) -> bool:
        return left is not None and right is not None and right in self.exact_match_concepts(left)

    def _hierarchy(
        self, concept: Hashable, direct: ConceptRelation, transitive: ConceptRelation
    ) -> list[Hashable]:
        require(concept, "concept", f"get {direct} concepts")
        result = transitive_closure(
            concept, successors_from_pairs(self._links[direct]), transitive=False
        )
        for found in transitive_closure(concept, successors_from_pairs(self._links[transitive])):
            if found not in result:
                result.append(found)
        return result
