from __future__ import annotations

from quart import Blueprint, current_app, render_template, request

from .arithmetic import calculate, InvalidInput

blueprint = Blueprint("calc", __name__, template_folder="templates")


@blueprint.get("/calc")
async def calc() -> str:
    op = request.args.get("op")
    a = request.args.get("a")
    b = request.args.get("b")

    outcome = calculate(op, a, b)
    current_app.logger.debug("calc op=%r a=%r b=%r -> %s", op, a, b, outcome)

    return await render_template(
        "calc.html",
        a=a if a is not None else "",
        b=b if b is not None else "",
        error=outcome if isinstance(outcome, InvalidInput) else None,
        result=None if isinstance(outcome, InvalidInput) else outcome,
    )
