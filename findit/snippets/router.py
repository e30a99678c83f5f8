import logging

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from findit import accuracy
from findit.challenges import solve_find_it
from findit.i18n import Translator, get_translator
from findit.snippets.errors import get_error_message, status_for_error
from findit.snippets.registry import SnippetRecord, get_code_challenges
from findit.snippets.verdict import evaluate_verdict, load_hints, next_hint

logger = logging.getLogger(__name__)
router = APIRouter(tags=["snippets"])


class VerdictRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    key: str
    selected_lines: list[int] | None = Field(default=None, alias="selectedLines")


class VerdictResponse(BaseModel):
    verdict: bool
    hint: str | None = None


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "error": message})


def registry_error_response(error: Exception) -> JSONResponse:
    status_code = status_for_error(error)
    logger.warning(f"Code challenge registry failed ({status_code}): {error!r}")
    return error_response(status_code, get_error_message(error))


def not_found_response(key: str) -> JSONResponse:
    return error_response(404, f"No code challenge for challenge key: {key}")


def record_failed_attempt(key: str):
    try:
        accuracy.store_find_it_verdict(key, False)
    except Exception:
        logger.exception(f"Could not record find-it attempt for {key}")


async def retrieve_code_snippet(key: str) -> SnippetRecord | None:
    challenges = await get_code_challenges()
    return challenges.get(key)


@router.get("/snippet/{challenge}")
async def serve_code_snippet(challenge: str):
    """Return the snippet text only; line classifications stay server-side."""
    try:
        snippet_data = await retrieve_code_snippet(challenge)
    except Exception as e:
        return registry_error_response(e)

    if not snippet_data:
        return not_found_response(challenge)
    return {"snippet": snippet_data.snippet}


@router.get("/snippets")
async def serve_challenges_with_code_snippet():
    try:
        challenges = await get_code_challenges()
    except Exception as e:
        return registry_error_response(e)
    return {"challenges": list(challenges)}


@router.post("/verdict", response_model=VerdictResponse, response_model_exclude_none=True)
async def check_vuln_lines(
    body: VerdictRequest,
    background_tasks: BackgroundTasks,
    translate: Translator = Depends(get_translator),
):
    key = body.key
    try:
        snippet_data = await retrieve_code_snippet(key)
    except Exception as e:
        return registry_error_response(e)
    if not snippet_data:
        return not_found_response(key)

    vuln_lines = snippet_data.vuln_lines
    verdict = evaluate_verdict(vuln_lines, snippet_data.neutral_lines, body.selected_lines)

    hints = load_hints(key)
    hint = None
    if hints:
        hint = next_hint(hints, accuracy.get_find_it_attempts(key), vuln_lines, translate)

    if verdict:
        await solve_find_it(key)
        return VerdictResponse(verdict=True)

    # Best effort: the attempt is recorded after the response has been sent
    background_tasks.add_task(record_failed_attempt, key)
    return VerdictResponse(verdict=False, hint=hint)
