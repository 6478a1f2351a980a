from __future__ import annotations

from typing import Optional

import gradio as gr
import pandas as pd

from .errors import ParseError
from .io_utils import read_text_content
from .log_utils import get_logger
from .records import compute_document_count_text, jsonable_rows, rows_to_table
from .samples import sample_queries, sample_text
from .session import QuerySession

logger = get_logger(__name__)


def ensure_session(session: Optional[QuerySession]) -> QuerySession:
    return session if session is not None else QuerySession()


def build_preview_frame(session: QuerySession) -> pd.DataFrame:
    headers, rows = session.preview()
    return pd.DataFrame(rows, columns=headers)


def build_result_view(session: QuerySession):
    result = session.result
    if result is None:
        return "", pd.DataFrame(), None
    if not result.ok:
        return f"Error: {result.error}", pd.DataFrame(), None
    headers, table = rows_to_table(result.rows)
    return f"Results ({len(result.rows)} rows)", pd.DataFrame(table, columns=headers), jsonable_rows(result.rows)


def build_history_view(session: QuerySession):
    entries = session.history_entries()
    frame = pd.DataFrame(
        [[e.display_time(), e.query_text] for e in entries],
        columns=["Time", "Query"],
    )
    choices = [(f"{e.display_time()}  {e.query_text}", e.id) for e in entries]
    return frame, gr.update(choices=choices, value=None, interactive=bool(choices))


def render_session(session: QuerySession, status: Optional[str] = None):
    """Outputs shared by every handler, in the order app.py wires them."""
    if status is None:
        status = compute_document_count_text(session.dataset) or "No data loaded."
    alias = session.dataset.alias
    result_msg, result_frame, result_json = build_result_view(session)
    history_frame, history_selector = build_history_view(session)
    return (
        session,
        alias,
        status,
        build_preview_frame(session),
        gr.update(choices=sample_queries(alias), value=None),
        result_msg,
        result_frame,
        result_json,
        history_frame,
        history_selector,
    )


def load_text_into_session(session: QuerySession, text: str, alias: Optional[str]) -> Optional[str]:
    try:
        session.load_dataset(text, alias)
    except ParseError as exc:
        return exc.message
    return None


def load_file_handler(file_obj, alias, session):
    session = ensure_session(session)
    if file_obj is None:
        return ("",) + render_session(session, "No file uploaded.")

    try:
        text = read_text_content(file_obj)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.warning("Could not read upload: %s", e)
        return (gr.update(),) + render_session(session, f"Error reading file: {str(e)}")

    error = load_text_into_session(session, text, alias)
    return (text,) + render_session(session, error)


def paste_json_handler(text, alias, session):
    session = ensure_session(session)
    if not text or not text.strip():
        session.unload()
        return render_session(session)

    error = load_text_into_session(session, text, alias)
    return render_session(session, error)


def load_sample_handler(name, session):
    session = ensure_session(session)
    session.load_sample(name)
    return (sample_text(name),) + render_session(session)


def update_alias_handler(alias, session):
    session = ensure_session(session)
    session.set_alias(alias)
    return render_session(session)


def pick_sample_query_handler(sql):
    if not sql:
        return gr.update()
    return sql


def execute_query_handler(sql, alias, session):
    session = ensure_session(session)
    if alias is not None and alias.strip() != session.dataset.alias:
        session.set_alias(alias)
    session.execute(sql or "")
    return render_session(session)


def clear_query_handler(session):
    session = ensure_session(session)
    session.clear_query()
    return ("",) + render_session(session)


def clear_history_handler(session):
    session = ensure_session(session)
    session.clear_history()
    return render_session(session)


def use_history_handler(entry_id, session):
    session = ensure_session(session)
    if not entry_id:
        return (gr.update(),) + render_session(session)
    try:
        query = session.use_history(entry_id)
    except KeyError:
        return (gr.update(),) + render_session(session, "That history entry no longer exists.")
    return (query,) + render_session(session)
