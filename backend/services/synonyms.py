"""Static skill synonym table and lookup.

Groups map a canonical term to its aliases, so "K8s" and "Kubernetes"
are recognised as the same skill. Lookup is case-insensitive exact
string matching; there is no fuzzy or learned matching here.
"""

from collections.abc import Mapping

SKILL_SYNONYMS: dict[str, list[str]] = {
    # Languages
    "javascript": ["js", "ecmascript", "es6"],
    "typescript": ["ts"],
    "python": ["py"],
    "go": ["golang"],
    "c#": ["csharp", "c sharp"],
    "c++": ["cpp"],
    # Frameworks & runtimes
    "react": ["reactjs", "react.js"],
    "node": ["nodejs", "node.js"],
    # Databases
    "postgresql": ["postgres", "psql"],
    "mongodb": ["mongo"],
    # Cloud & DevOps
    "kubernetes": ["k8s"],
    "aws": ["amazon web services"],
    "gcp": ["google cloud platform"],
    "azure": ["microsoft azure"],
    "ci/cd": ["continuous integration", "continuous deployment"],
    # AI/ML
    "ml": ["machine learning"],
    "ai": ["artificial intelligence"],
    # Practices
    "api": ["apis", "rest api", "restful"],
    "agile": ["scrum", "kanban"],
}


class SynonymResolver:
    """Answers equivalence questions against a fixed synonym table."""

    def __init__(self, groups: Mapping[str, list[str]] | None = None) -> None:
        table = SKILL_SYNONYMS if groups is None else groups
        self._groups: list[tuple[str, ...]] = []
        self._index: dict[str, int] = {}
        for canonical, aliases in table.items():
            variants = tuple(dict.fromkeys(v.lower().strip() for v in (canonical, *aliases)))
            group_id = len(self._groups)
            self._groups.append(variants)
            for variant in variants:
                # first group wins if an alias is listed twice
                self._index.setdefault(variant, group_id)

    def variants_of(self, term: str) -> list[str]:
        """All spellings in the term's group, canonical first; [] if ungrouped."""
        group_id = self._index.get(term.lower().strip())
        if group_id is None:
            return []
        return list(self._groups[group_id])

    def canonical(self, term: str) -> str:
        variants = self.variants_of(term)
        return variants[0] if variants else term.lower().strip()

    def are_equivalent(self, a: str, b: str) -> bool:
        a_key, b_key = a.lower().strip(), b.lower().strip()
        if a_key == b_key:
            return True
        a_group = self._index.get(a_key)
        return a_group is not None and a_group == self._index.get(b_key)


default_resolver = SynonymResolver()
