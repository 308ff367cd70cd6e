"""
Auto-Reject Logic - spot choice questions whose answer gives itself away.

If the correct answer is much longer than the wrong options, a learner can
pick it by length alone and the question is a weak test item.

Pure Python only: no database, no Flask. Malformed input raises
``ValueError`` and the caller decides whether to skip the question.
"""
import json
from dataclasses import dataclass
from typing import Any, List, Optional

from examquiz_app.logics.question_options import normalize_options

DEFAULT_LENGTH_THRESHOLD = 20


@dataclass(frozen=True)
class LengthVerdict:
    avg_correct_length: float
    avg_incorrect_length: float
    threshold: int = DEFAULT_LENGTH_THRESHOLD

    @property
    def difference(self) -> float:
        return self.avg_correct_length - self.avg_incorrect_length

    @property
    def rejected(self) -> bool:
        # Strictly greater: a difference equal to the threshold is kept.
        return self.difference > self.threshold

    @property
    def comment(self) -> str:
        return (
            f"Auto-rejected: answer length is {_format_number(self.avg_correct_length)} "
            f"and average incorrect length is {_format_number(self.avg_incorrect_length)}"
        )


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def parse_answer(raw: Any) -> Optional[List[Any]]:
    """The stored answer as a list, or None when it is not a list."""
    if raw is None:
        return None
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Answer is not valid JSON: {exc}") from exc
    if not isinstance(raw, list):
        return None
    return raw


def _text_length(value: Any) -> int:
    if not isinstance(value, str):
        raise ValueError(f"Expected text, got {type(value).__name__}")
    return len(value)


def evaluate_question(answer_raw: Any, options_raw: Any,
                      threshold: int = DEFAULT_LENGTH_THRESHOLD) -> Optional[LengthVerdict]:
    """
    Compare the correct answer's length with the wrong options' mean length.

    Returns None when there is nothing to compare: no options, a non-list
    answer, no option matching the answer, or no wrong option at all.

    The correct length is the length of the first answer divided by the
    number of answers, kept as-is for multi-select questions.

    Examples:
        >>> correct = "a much longer correct answer text"
        >>> verdict = evaluate_question([correct], [correct, "a", "bb", "ccc"])
        >>> verdict.rejected
        True
        >>> evaluate_question('["x"]', ["y", "z"]) is None
        True
    """
    options = normalize_options(options_raw)
    answer = parse_answer(answer_raw)
    if not options or not answer:
        return None

    avg_correct_length = _text_length(answer[0]) / len(answer)

    incorrect_lengths = [_text_length(option) for option in options.values if option not in answer]

    if len(incorrect_lengths) == len(options):
        # No option matches the stored answer.
        return None
    if not incorrect_lengths:
        return None

    avg_incorrect_length = sum(incorrect_lengths) / len(incorrect_lengths)
    return LengthVerdict(avg_correct_length, avg_incorrect_length, threshold)
