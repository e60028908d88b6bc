from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_optional_date, today_local
from ..common.web import current_scope, current_user, current_user_id, login_required
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/wages", methods=["GET"], endpoint="wages")
    @login_required
    def wages():
        scope = current_scope()
        today = today_local()

        start_s = request.args.get("start") or today.replace(day=1).isoformat()
        end_s = request.args.get("end") or today.isoformat()

        history_id = request.args.get("employee_id", type=int)

        sheet, employees, history = [], [], []
        try:
            employees = container.employee_service.list_for_scope(scope)
            sheet = container.payroll_service.wage_sheet(
                scope, parse_optional_date(start_s), parse_optional_date(end_s)
            )
            if history_id:
                history = container.advance_service.list_for_employee(scope, history_id)
        except AuthorizationError as e:
            flash(str(e), "danger")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("load wage sheet failed")
            flash("System error while loading wages", "danger")

        return render_template(
            "wages.html",
            start=start_s,
            end=end_s,
            sheet=sheet,
            employees=employees,
            history_id=history_id,
            history=history,
            advance_scoping=container.payroll_service.advance_scoping,
            current_user=current_user(),
            active_page="wages",
        )

    @app.route("/wages/advance", methods=["POST"], endpoint="wages_advance")
    @login_required
    def wages_advance():
        try:
            container.advance_service.record_advance(
                scope=current_scope(),
                paid_by=current_user_id(),
                employee_id=request.form.get("employee_id", type=int),
                amount=request.form.get("amount"),
                payment_date=parse_optional_date(request.form.get("payment_date")),
            )
            flash("Advance payment recorded.", "success")
        except AuthorizationError as e:
            flash(str(e), "danger")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("record advance failed")
            flash("System error while recording the advance", "danger")

        return redirect(url_for("wages", start=request.form.get("start"), end=request.form.get("end")))
