"""
Question options in one canonical shape.

Options reach us as a JSON list of choices or as a JSON object keyed by option
label (older captured data). ``normalize_options`` turns both into a
``QuestionOptions`` value so that the rest of the code handles one shape.
"""
import json
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple, Union

KIND_LIST = 'list'
KIND_KEYED = 'keyed'


@dataclass(frozen=True)
class QuestionOptions:
    """Candidate answers of a question, either ordered or keyed by label."""

    kind: str
    values: Tuple[Any, ...]
    keys: Tuple[str, ...] = ()

    @classmethod
    def from_list(cls, values: Sequence[Any]) -> 'QuestionOptions':
        return cls(KIND_LIST, tuple(values))

    @classmethod
    def from_mapping(cls, mapping: dict) -> 'QuestionOptions':
        return cls(KIND_KEYED, tuple(mapping.values()), tuple(str(key) for key in mapping.keys()))

    @property
    def is_keyed(self) -> bool:
        return self.kind == KIND_KEYED

    def __len__(self) -> int:
        return len(self.values)

    def to_json(self) -> Union[list, dict]:
        """Back to the shape the options were stored in."""
        if self.is_keyed:
            return dict(zip(self.keys, self.values))
        return list(self.values)


def normalize_options(raw: Any) -> Optional[QuestionOptions]:
    """
    Build a ``QuestionOptions`` from a stored value.

    Accepts a list, a dict, or a JSON string encoding either. ``None`` and
    empty strings mean "no options". Any other shape raises ``ValueError``.
    """
    if raw is None:
        return None
    if isinstance(raw, QuestionOptions):
        return raw
    if isinstance(raw, str):
        if not raw.strip():
            return None
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Options are not valid JSON: {exc}") from exc

    if isinstance(raw, dict):
        return QuestionOptions.from_mapping(raw)
    if isinstance(raw, (list, tuple)):
        return QuestionOptions.from_list(raw)
    raise ValueError(f"Unsupported options shape: {type(raw).__name__}")
