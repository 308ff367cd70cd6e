"""
Ranking Logic - leaderboard aggregation, composite score and positions.

Pure Python only: no database, no Flask.

Composite score:
    score = round(accuracy% + distinct_subjects * 10 + attempts * 0.5)

Breadth (10 points per subject) and volume (half a point per attempt) are
added to accuracy so that a learner with two lucky answers does not outrank
one who works through hundreds of questions.
"""
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

CORRECT = 'correct'
SUBJECT_WEIGHT = 10
ATTEMPT_WEIGHT = 0.5


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like JavaScript's Math.round (halves go up), not banker's rounding."""
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if digits == 0 else rounded


def base_subject_name(name: Optional[str]) -> Optional[str]:
    """``"Mathematics P1"`` -> ``"Mathematics"``."""
    if not name:
        return None
    return name.split(' ')[0]


@dataclass
class AttemptRecord:
    """One attempt joined with its learner and subject."""
    learner_id: int
    name: str
    grade: Optional[int]
    subject_name: Optional[str]
    outcome: str
    created: Optional[datetime] = None


@dataclass
class LeaderboardEntry:
    id: int
    name: str
    grade: Optional[int]
    total_questions: int = 0
    correct_answers: int = 0
    subjects: List[str] = field(default_factory=list)
    last_active: Optional[datetime] = None
    not_in_top: bool = False

    @property
    def unique_subjects(self) -> int:
        return len(self.subjects)

    @property
    def accuracy(self) -> int:
        if not self.total_questions:
            return 0
        return round_half_up(self.correct_answers / self.total_questions * 100)

    @property
    def score(self) -> int:
        if not self.total_questions:
            return 0
        return round_half_up(
            self.correct_answers / self.total_questions * 100
            + self.unique_subjects * SUBJECT_WEIGHT
            + self.total_questions * ATTEMPT_WEIGHT
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'name': self.name,
            'grade': self.grade,
            'total_questions': self.total_questions,
            'correct_answers': self.correct_answers,
            'accuracy': self.accuracy,
            'unique_subjects': self.unique_subjects,
            'subjects': list(self.subjects),
            'last_active': _iso(self.last_active),
            'score': self.score,
        }
        if self.not_in_top:
            data['notInTop10'] = True
        return data


def _iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.isoformat() + 'Z'
    return value.isoformat()


def aggregate_attempts(attempts: Iterable[AttemptRecord]) -> List[LeaderboardEntry]:
    """Group attempts by learner, in order of first appearance."""
    entries: Dict[int, LeaderboardEntry] = {}
    for attempt in attempts:
        entry = entries.get(attempt.learner_id)
        if entry is None:
            entry = LeaderboardEntry(id=attempt.learner_id, name=attempt.name, grade=attempt.grade)
            entries[attempt.learner_id] = entry

        entry.total_questions += 1
        if attempt.outcome == CORRECT:
            entry.correct_answers += 1

        subject = base_subject_name(attempt.subject_name)
        if subject and subject not in entry.subjects:
            entry.subjects.append(subject)

        if attempt.created is not None and (entry.last_active is None or attempt.created > entry.last_active):
            entry.last_active = attempt.created

    return list(entries.values())


def build_leaderboard(entries: Sequence[LeaderboardEntry], limit: int,
                      learner_id: Any = None, learner_name: str = None,
                      learner_grade: Optional[int] = None) -> Dict[str, Any]:
    """
    Rank ``entries`` by score and keep the top ``limit``.

    ``user_rank`` is the 1-based place of ``learner_id`` in the full ranking
    (None when the learner has no attempts). The learner is appended flagged
    ``notInTop10`` when outside the top list, so the caller always sees
    their own standing exactly once.
    """
    ranked = sorted(entries, key=lambda entry: entry.score, reverse=True)
    top = list(ranked[:max(limit, 0)])

    user_rank = None
    user_entry = None
    for index, entry in enumerate(ranked, start=1):
        if entry.id == learner_id:
            user_rank = index
            user_entry = entry
            break

    rankings = [entry.to_dict() for entry in top]
    in_top = user_rank is not None and user_rank <= len(top)
    if learner_id is not None and not in_top:
        if user_entry is None:
            user_entry = LeaderboardEntry(id=learner_id, name=learner_name, grade=learner_grade)
        user_entry.not_in_top = True
        rankings.append(user_entry.to_dict())

    return {
        'user_rank': user_rank,
        'user_score': user_entry.score if user_entry is not None else 0,
        'rankings': rankings,
    }


def assign_positions(scores: Sequence[float]) -> List[int]:
    """
    Competition ranking over scores already sorted high to low.

    Scores equal after rounding to two decimals share a position and the
    next distinct score skips ahead by the size of the tie: ``1, 1, 3``.
    """
    positions: List[int] = []
    previous = None
    for index, raw in enumerate(scores):
        score = round_half_up(raw or 0, 2)
        if previous is not None and score == previous:
            positions.append(positions[-1])
        else:
            positions.append(index + 1)
        previous = score
    return positions


@dataclass
class LearnerScore:
    uid: str
    name: str
    score: float


def rank_top_learners(learners: Sequence[LearnerScore], uid: str, limit: int = 10) -> Dict[str, Any]:
    """
    Positional view of every learner's cumulative score.

    Returns the top ``limit`` rankings plus the learner ``uid`` appended with
    ``notInTop10`` when not among them.
    """
    ordered = sorted(learners, key=lambda learner: round_half_up(learner.score or 0, 2), reverse=True)
    positions = assign_positions([learner.score for learner in ordered])

    position_map = {}
    for learner, position in zip(ordered, positions):
        position_map[learner.uid] = (position, round_half_up(learner.score or 0, 2))

    if uid not in position_map:
        raise ValueError(f"Learner {uid} is not part of the ranking population")

    rankings = []
    in_top = False
    for learner in ordered[:max(limit, 0)]:
        position, score = position_map[learner.uid]
        is_current = learner.uid == uid
        in_top = in_top or is_current
        rankings.append({
            'name': learner.name,
            'score': score,
            'position': position,
            'isCurrentLearner': is_current,
        })

    current_position, current_score = position_map[uid]
    if not in_top:
        current = next(learner for learner in ordered if learner.uid == uid)
        rankings.append({
            'name': current.name,
            'score': current_score,
            'position': current_position,
            'isCurrentLearner': True,
            'notInTop10': True,
        })

    return {
        'rankings': rankings,
        'currentLearnerScore': current_score,
        'currentLearnerPosition': current_position,
        'totalLearners': len(ordered),
    }
