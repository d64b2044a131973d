# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""In-memory backing for test sheets and wrong-answer sheets.

The server does not serve these two families yet, so SheetService reads
and writes them here. The store is seeded with three sheets of each kind
and behaves like the real endpoints would: bookmark toggles and deletes
stick, created sheets get fresh ids, and submitted test answers are graded.

Every method returns copies, so callers never hold references into the
store's state.
"""

import logging
from datetime import datetime

from memorable.domains.documents.models import (
    FileType,
    Question,
    Testsheet,
    TestsheetDetail,
    Wrongsheet,
    WrongsheetDetail,
)
from memorable.domains.documents.schemas import WrongsheetQuestion
from memorable.services.api.exceptions import SheetNotFoundError
from memorable.utils.datetime import utc_now

logger = logging.getLogger(__name__)

# (question_id, answer) of the two question groups every mock test sheet gets
TESTSHEET_GROUP1_ANSWERS: tuple[tuple[int, str], ...] = (
    (1, "Answer 1"),
    (2, "Answer 2"),
    (3, "Answer 1"),
    (4, "Answer 2"),
    (5, "Answer 1"),
    (6, "Answer 2"),
)
TESTSHEET_GROUP2_ANSWERS: tuple[tuple[int, str], ...] = (
    (7, "Answer 3"),
    (8, "Answer 4"),
    (9, "Answer 1"),
    (10, "Answer 2"),
)
WRONGSHEET_ANSWERS: tuple[tuple[int, str], ...] = (
    (1, "Answer 1"),
    (2, "Answer 2"),
)

SEED_SHEETS: tuple[tuple[int, str, bool], ...] = (
    (1, "Math", True),
    (2, "Science", False),
    (3, "History", True),
)


def _questions(answers: tuple[tuple[int, str], ...]) -> list[Question]:
    return [
        Question(question_id=qid, question=f"Question {qid}", answer=answer)
        for qid, answer in answers
    ]


def _is_answered(user_answer: str | None) -> bool:
    return bool(user_answer and user_answer.strip())


def _is_correct(user_answer: str | None, answer: str) -> bool:
    return user_answer is not None and user_answer.strip() == answer.strip()


def _apply_answers(questions: list[Question], answers: list[str]) -> list[Question]:
    # Positional match; missing answers stay None
    return [
        question.model_copy(
            update={"user_answer": answers[index] if index < len(answers) else None}
        )
        for index, question in enumerate(questions)
    ]


class MockSheetStore:
    """Stateful store for the mock-backed sheet families.

    Attributes:
        testsheets: Test sheet summaries by id.
        wrongsheets: Wrong-answer sheet summaries by id.

    Example:
        store = MockSheetStore()
        detail = store.update_testsheet(1, ["Answer 1"] * 6, ["Answer 3"] * 4)
        print(detail.score)  # [3, 1]
    """

    def __init__(self, created_at: datetime | None = None) -> None:
        """Seed the store.

        Args:
            created_at: Creation time stamped on the seed sheets. Defaults to now.
        """
        created_at = created_at or utc_now()
        self.testsheets: dict[int, Testsheet] = {}
        self.wrongsheets: dict[int, Wrongsheet] = {}
        self._testsheet_details: dict[int, TestsheetDetail] = {}
        self._wrongsheet_details: dict[int, WrongsheetDetail] = {}

        for sheet_id, category, bookmarked in SEED_SHEETS:
            self._add_testsheet(sheet_id, f"Testsheet {sheet_id}", category, bookmarked, created_at)
            self._add_wrongsheet(
                sheet_id,
                f"Wrongsheet {sheet_id}",
                category,
                bookmarked,
                created_at,
                _questions(WRONGSHEET_ANSWERS),
            )

        # Ids only grow, so a deleted sheet's key is never handed out again
        self._next_testsheet_id = max(self.testsheets, default=0) + 1
        self._next_wrongsheet_id = max(self.wrongsheets, default=0) + 1

    # =========================================================================
    # Test sheets
    # =========================================================================

    def _add_testsheet(
        self,
        sheet_id: int,
        name: str,
        category: str,
        bookmarked: bool,
        created_at: datetime,
    ) -> TestsheetDetail:
        self.testsheets[sheet_id] = Testsheet(
            id=sheet_id,
            name=name,
            category=category,
            is_bookmarked=bookmarked,
            created_date=created_at,
        )
        detail = TestsheetDetail(
            testsheet_id=sheet_id,
            name=name,
            category=category,
            questions1=_questions(TESTSHEET_GROUP1_ANSWERS),
            questions2=_questions(TESTSHEET_GROUP2_ANSWERS),
        )
        self._testsheet_details[sheet_id] = detail
        return detail

    def _require_testsheet(self, sheet_id: int) -> Testsheet:
        try:
            return self.testsheets[sheet_id]
        except KeyError:
            raise SheetNotFoundError(FileType.TESTSHEET.value, sheet_id) from None

    def list_testsheets(self) -> list[Testsheet]:
        """Return copies of every test sheet summary."""
        return [sheet.model_copy() for sheet in self.testsheets.values()]

    def get_testsheet(self, sheet_id: int) -> TestsheetDetail:
        """Return the detail of a test sheet.

        Raises:
            SheetNotFoundError: If the id is unknown.
        """
        self._require_testsheet(sheet_id)
        return self._testsheet_details[sheet_id].model_copy(deep=True)

    def create_testsheet(self, worksheet_id: int) -> TestsheetDetail:
        """Create a test sheet from a worksheet.

        The worksheet only seeds the request; questions come from the template.
        """
        sheet_id = self._next_testsheet_id
        self._next_testsheet_id += 1
        category = SEED_SHEETS[0][1]
        detail = self._add_testsheet(
            sheet_id,
            f"Testsheet {sheet_id}",
            category,
            False,
            utc_now(),
        )
        logger.info("Created mock testsheet %d from worksheet %d", sheet_id, worksheet_id)
        return detail.model_copy(deep=True)

    def update_testsheet(
        self,
        sheet_id: int,
        user_answers1: list[str],
        user_answers2: list[str],
    ) -> TestsheetDetail:
        """Record and grade the user's answers.

        Args:
            sheet_id: Test sheet to grade.
            user_answers1: Answers for question group 1, by position.
            user_answers2: Answers for question group 2, by position.

        Returns:
            The graded detail with ``score`` and ``is_correct`` filled in.

        Raises:
            SheetNotFoundError: If the id is unknown.
        """
        self._require_testsheet(sheet_id)
        detail = self._testsheet_details[sheet_id]

        questions1 = _apply_answers(detail.questions1, user_answers1)
        questions2 = _apply_answers(detail.questions2, user_answers2)
        correct1 = [_is_correct(q.user_answer, q.answer) for q in questions1]
        correct2 = [_is_correct(q.user_answer, q.answer) for q in questions2]

        graded = detail.model_copy(
            update={
                "questions1": questions1,
                "questions2": questions2,
                "is_complete_all_blanks": [
                    all(_is_answered(q.user_answer) for q in questions1),
                    all(_is_answered(q.user_answer) for q in questions2),
                ],
                "score": [sum(correct1), sum(correct2)],
                "is_correct": [*correct1, *correct2],
            }
        )
        self._testsheet_details[sheet_id] = graded
        logger.info("Graded mock testsheet %d: score=%s", sheet_id, graded.score)
        return graded.model_copy(deep=True)

    def toggle_testsheet_bookmark(self, sheet_id: int) -> Testsheet:
        """Flip the bookmark flag and return the updated summary."""
        sheet = self._require_testsheet(sheet_id)
        sheet.is_bookmarked = not sheet.is_bookmarked
        return sheet.model_copy()

    def delete_testsheet(self, sheet_id: int) -> None:
        """Remove a test sheet.

        Raises:
            SheetNotFoundError: If the id is unknown.
        """
        self._require_testsheet(sheet_id)
        del self.testsheets[sheet_id]
        del self._testsheet_details[sheet_id]

    # =========================================================================
    # Wrong-answer sheets
    # =========================================================================

    def _add_wrongsheet(
        self,
        sheet_id: int,
        name: str,
        category: str,
        bookmarked: bool,
        created_at: datetime,
        questions: list[Question],
    ) -> WrongsheetDetail:
        self.wrongsheets[sheet_id] = Wrongsheet(
            id=sheet_id,
            name=name,
            category=category,
            is_bookmarked=bookmarked,
            created_date=created_at,
        )
        detail = WrongsheetDetail(
            wrongsheet_id=sheet_id,
            name=name,
            category=category,
            questions=questions,
        )
        self._wrongsheet_details[sheet_id] = detail
        return detail

    def _require_wrongsheet(self, sheet_id: int) -> Wrongsheet:
        try:
            return self.wrongsheets[sheet_id]
        except KeyError:
            raise SheetNotFoundError(FileType.WRONGSHEET.value, sheet_id) from None

    def list_wrongsheets(self) -> list[Wrongsheet]:
        """Return copies of every wrong-answer sheet summary."""
        return [sheet.model_copy() for sheet in self.wrongsheets.values()]

    def get_wrongsheet(self, sheet_id: int) -> WrongsheetDetail:
        """Return the detail of a wrong-answer sheet.

        Raises:
            SheetNotFoundError: If the id is unknown.
        """
        self._require_wrongsheet(sheet_id)
        return self._wrongsheet_details[sheet_id].model_copy(deep=True)

    def create_wrongsheet(self, questions: list[WrongsheetQuestion]) -> WrongsheetDetail:
        """Collect questions into a new wrong-answer sheet.

        Args:
            questions: Validated questions; they are numbered from 1 in order.
        """
        sheet_id = self._next_wrongsheet_id
        self._next_wrongsheet_id += 1
        built = [
            Question(
                question_id=index,
                question=item.question,
                answer=item.answer,
                user_answer=item.user_answer,
            )
            for index, item in enumerate(questions, start=1)
        ]
        detail = self._add_wrongsheet(
            sheet_id,
            f"Wrongsheet {sheet_id}",
            SEED_SHEETS[0][1],
            False,
            utc_now(),
            built,
        )
        logger.info("Created mock wrongsheet %d with %d questions", sheet_id, len(built))
        return detail.model_copy(deep=True)

    def toggle_wrongsheet_bookmark(self, sheet_id: int) -> Wrongsheet:
        """Flip the bookmark flag and return the updated summary."""
        sheet = self._require_wrongsheet(sheet_id)
        sheet.is_bookmarked = not sheet.is_bookmarked
        return sheet.model_copy()

    def delete_wrongsheet(self, sheet_id: int) -> None:
        """Remove a wrong-answer sheet.

        Raises:
            SheetNotFoundError: If the id is unknown.
        """
        self._require_wrongsheet(sheet_id)
        del self.wrongsheets[sheet_id]
        del self._wrongsheet_details[sheet_id]
