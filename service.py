from __future__ import annotations

import logging
import os
import uuid
from collections import OrderedDict
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from quiz_engine import (
    Difficulty,
    HistoryStore,
    MathQuizGenerator,
    Operation,
    Question,
    QuizSession,
    SessionSettings,
)
from quiz_engine.models import AnswerRecord
from quiz_engine.report import export_txt
from quiz_engine.session import AlreadyAnsweredError, NotAnsweredError, SessionFinishedError

logger = logging.getLogger("arithmetic-quiz")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Arithmetic Quiz Service")
generator = MathQuizGenerator()
history = HistoryStore(os.environ.get("QUIZ_HISTORY_PATH", "quiz_history.json"))
# most recently used last; the oldest session is dropped past the cap
MAX_SESSIONS = 100
sessions: "OrderedDict[str, QuizSession]" = OrderedDict()


class GenerateRequest(BaseModel):
    operation: Operation = Operation.MIXED
    difficulty: Difficulty = Difficulty.EASY
    n: int = Field(default=10, ge=1, le=100)


class ChoiceResponse(BaseModel):
    label: str
    value: int


class QuestionResponse(BaseModel):
    text: str
    operation: str
    difficulty: str
    choices: List[ChoiceResponse]


class GeneratedQuestionResponse(QuestionResponse):
    operands: List[int]
    answer: int
    correctLabel: str
    hint: str


class SessionResponse(BaseModel):
    id: str
    position: int
    total: int
    question: Optional[QuestionResponse]


class AnswerRequest(BaseModel):
    label: Optional[str] = None


class AnswerResponse(BaseModel):
    outcome: str
    correctLabel: str
    correctValue: int
    hintUsed: bool
    finished: bool
    next: Optional[QuestionResponse]


class StatsResponse(BaseModel):
    total: int
    correct: int
    wrong: int
    blank: int
    successPercentage: int
    title: str


def _question_out(q: Question | None) -> QuestionResponse | None:
    if q is None:
        return None
    return QuestionResponse(
        text=q.text,
        operation=q.operation.value,
        difficulty=q.difficulty.value,
        choices=[ChoiceResponse(label=c.label, value=c.value) for c in q.choices],
    )


def _get_session(session_id: str) -> QuizSession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    sessions.move_to_end(session_id)
    return session


def _store_session(session: QuizSession) -> str:
    session_id = uuid.uuid4().hex
    sessions[session_id] = session
    while len(sessions) > MAX_SESSIONS:
        evicted, _ = sessions.popitem(last=False)
        logger.info("dropped session %s", evicted)
    return session_id


@app.post("/generate", response_model=List[GeneratedQuestionResponse])
def generate_questions(body: GenerateRequest) -> List[GeneratedQuestionResponse]:
    items = generator.generate_batch(
        operation=body.operation,
        difficulty=body.difficulty,
        n=body.n,
    )
    return [
        GeneratedQuestionResponse(
            text=q.text,
            operation=q.operation.value,
            difficulty=q.difficulty.value,
            choices=[ChoiceResponse(label=c.label, value=c.value) for c in q.choices],
            operands=list(q.operands),
            answer=q.correct_answer,
            correctLabel=q.correct_choice.label,
            hint=q.hint,
        )
        for q in items
    ]


@app.post("/sessions", response_model=SessionResponse)
def create_session(body: SessionSettings) -> SessionResponse:
    session = QuizSession(body, generator=generator, history=history).start()
    session_id = _store_session(session)
    return SessionResponse(
        id=session_id,
        position=session.position + 1,
        total=len(session.questions),
        question=_question_out(session.current),
    )


@app.post("/sessions/{session_id}/hint")
def reveal_hint(session_id: str) -> dict:
    session = _get_session(session_id)
    try:
        return {"hint": session.reveal_hint()}
    except SessionFinishedError as e:
        raise HTTPException(status_code=409, detail=str(e))


@app.post("/sessions/{session_id}/answer", response_model=AnswerResponse)
def answer_question(session_id: str, body: AnswerRequest) -> AnswerResponse:
    session = _get_session(session_id)
    try:
        record: AnswerRecord = session.answer(body.label)
        next_question = session.advance()
    except (AlreadyAnsweredError, NotAnsweredError, SessionFinishedError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return AnswerResponse(
        outcome=record.outcome.value,
        correctLabel=record.correct_label,
        correctValue=record.correct_value,
        hintUsed=record.hint_used,
        finished=session.is_finished,
        next=_question_out(next_question),
    )


@app.post("/sessions/{session_id}/finish", response_model=StatsResponse)
def finish_session(session_id: str) -> StatsResponse:
    stats = _get_session(session_id).finish()
    return StatsResponse(
        total=stats.total,
        correct=stats.correct,
        wrong=stats.wrong,
        blank=stats.blank,
        successPercentage=stats.success_percentage,
        title=stats.result_title,
    )


@app.get("/sessions/{session_id}/report", response_class=PlainTextResponse)
def session_report(session_id: str) -> str:
    return export_txt(_get_session(session_id))


@app.get("/history")
def get_history() -> List[dict]:
    return [e.model_dump() for e in history.load()]


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
