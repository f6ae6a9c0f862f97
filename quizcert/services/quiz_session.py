import logging
from dataclasses import dataclass

from quizcert.schemas.quiz import Quiz

logger = logging.getLogger(__name__)

UNANSWERED = -1


@dataclass(frozen=True)
class ScoreResult:
    correct: int
    total: int
    percentage: int


def round_percentage(correct: int, total: int) -> int:
    """정수 연산으로 백분율 반올림 (0.5는 올림)"""
    return (200 * correct + total) // (2 * total)


class QuizSession:
    """퀴즈 진행 상태 (메모리 전용, 저장되지 않음)

    선택은 현재 위치를 이동시키지 않으며, 다음 문제로의 이동은
    현재 문제에 답한 뒤에만 가능하다.
    범위를 벗어난 위치/선택지는 호출자 버그이므로 IndexError를 발생시킨다.
    """

    def __init__(self, quiz: Quiz):
        self.quiz = quiz
        self.answers: list[int] = [UNANSWERED] * len(quiz.questions)
        self.current_index = 0

    @property
    def total(self) -> int:
        return len(self.quiz.questions)

    def select_answer(self, position: int, option_index: int) -> None:
        if not 0 <= position < self.total:
            raise IndexError(f"문제 위치가 범위를 벗어났습니다: {position} (총 {self.total}개)")
        options = self.quiz.questions[position].options
        if not 0 <= option_index < len(options):
            raise IndexError(
                f"선택지 인덱스가 범위를 벗어났습니다: {option_index} (선택지 {len(options)}개)"
            )
        self.answers[position] = option_index

    def is_answered(self, position: int) -> bool:
        return self.answers[position] != UNANSWERED

    def can_advance(self) -> bool:
        return self.current_index < self.total - 1 and self.is_answered(self.current_index)

    def advance(self) -> bool:
        """다음 문제로 이동. 이동했으면 True"""
        if not self.can_advance():
            return False
        self.current_index += 1
        return True

    def retreat(self) -> bool:
        """이전 문제로 이동. 이동했으면 True"""
        if self.current_index == 0:
            return False
        self.current_index -= 1
        return True

    def is_complete(self) -> bool:
        return all(answer != UNANSWERED for answer in self.answers)

    def score(self) -> ScoreResult:
        correct = sum(
            1
            for answer, question in zip(self.answers, self.quiz.questions)
            if answer == question.correct_answer_index
        )
        return ScoreResult(
            correct=correct,
            total=self.total,
            percentage=round_percentage(correct, self.total),
        )
