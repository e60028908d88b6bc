from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_optional_date, today_local
from ..common.web import admin_required, current_role, current_scope, current_user, current_user_id, login_required
from ..core.enums import AttendanceType, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["GET", "POST"], endpoint="attendance")
    @login_required
    def attendance():
        scope = current_scope()

        if request.method == "POST":
            work_date = None
            try:
                work_date = parse_optional_date(request.form.get("work_date"))
                container.attendance_service.mark_attendance(
                    scope=scope,
                    marked_by=current_user_id(),
                    employee_id=request.form.get("employee_id", type=int),
                    attendance_type=request.form.get("attendance_type", ""),
                    work_date=work_date,
                )
                flash("Attendance marked successfully.", "success")
            except AuthorizationError as e:
                flash(str(e), "danger")
            except ValidationError as e:
                flash(str(e), "warning")
            except Exception:
                app.logger.exception("mark attendance failed")
                flash("System error while marking attendance", "danger")

            selected = work_date or today_local()
            return redirect(url_for("attendance", date=selected.isoformat()))

        try:
            selected = parse_optional_date(request.args.get("date")) or today_local()
        except ValidationError as e:
            flash(str(e), "warning")
            selected = today_local()

        employees, rows = [], []
        try:
            employees = container.employee_service.list_for_scope(scope)
            rows = container.attendance_service.list_for_date(scope, selected)
        except Exception:
            app.logger.exception("load attendance for %s failed", selected)
            flash("System error while loading attendance", "danger")

        return render_template(
            "attendance.html",
            selected_date=selected.isoformat(),
            employees=employees,
            rows=rows,
            attendance_types=list(AttendanceType),
            is_admin=current_role() == Role.ADMIN,
            current_user=current_user(),
            active_page="attendance",
        )

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="api_attendance_delete")
    @admin_required
    def api_attendance_delete(attendance_id: int):
        try:
            container.attendance_service.remove_attendance(current_role=current_role(), attendance_id=attendance_id)
            return jsonify({"success": True, "message": "Attendance removed"}), 200
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            app.logger.exception("remove attendance %s failed", attendance_id)
            return jsonify({"success": False, "message": "System error while removing attendance"}), 500
