# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Request bodies sent to the Memorable API.

Each schema serializes to the server's camelCase keys via
``model_dump(by_alias=True, mode="json")``.
"""

from pydantic import Field

from memorable.domains.documents.models import SheetModel


class CreateWorksheetRequest(SheetModel):
    """Body of ``POST /api/worksheet``."""

    user_id: str = Field(alias="userId")
    name: str = Field(min_length=1)
    category: str
    content: str


class UpdateTestsheetRequest(SheetModel):
    """User answers submitted for grading, one list per question group."""

    user_answers1: list[str] = Field(default_factory=list, alias="userAnswers1")
    user_answers2: list[str] = Field(default_factory=list, alias="userAnswers2")


class WrongsheetQuestion(SheetModel):
    """A question collected into a wrong-answer sheet."""

    question: str
    answer: str
    user_answer: str | None = Field(default=None, alias="userAnswer")


class CreateWrongsheetRequest(SheetModel):
    """Questions collected into a new wrong-answer sheet."""

    questions: list[WrongsheetQuestion] = Field(min_length=1)
