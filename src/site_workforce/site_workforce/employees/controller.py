from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import today_local
from ..common.web import admin_required, current_role, current_scope, current_user, current_user_id, login_required
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container
from ..reports.service import DashboardStats


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            stats = container.report_service.dashboard_stats(current_scope(), today_local())
        except Exception:
            app.logger.exception("load dashboard failed")
            flash("System error while loading the dashboard", "danger")
            stats = DashboardStats(total_employees=0, marked_today=0, active_sites=0)
        return render_template(
            "dashboard.html",
            stats=stats,
            current_user=current_user(),
            active_page="dashboard",
        )

    @app.route("/employees", methods=["GET", "POST"], endpoint="employees")
    @login_required
    def employees():
        scope = current_scope()

        if request.method == "POST":
            try:
                container.employee_service.create_employee(
                    scope=scope,
                    added_by=current_user_id(),
                    name=request.form.get("name", ""),
                    employee_code=request.form.get("employee_code", ""),
                    job_category=request.form.get("job_category", ""),
                    daily_wage=request.form.get("daily_wage", ""),
                    site_location=request.form.get("site_location"),
                )
                flash("Employee added successfully.", "success")
                return redirect(url_for("employees"))
            except ValidationError as e:
                flash(str(e), "warning")
            except Exception:
                app.logger.exception("add employee failed")
                flash("System error while adding the employee", "danger")

        rows = []
        try:
            rows = container.employee_service.list_for_scope(scope)
        except Exception:
            app.logger.exception("list employees failed")
            flash("System error while loading employees", "danger")

        return render_template(
            "employees.html",
            employees=rows,
            is_admin=current_role() == Role.ADMIN,
            current_user=current_user(),
            active_page="employees",
        )

    @app.route("/employees/delete/<int:employee_id>", methods=["POST"], endpoint="employee_delete")
    @admin_required
    def employee_delete(employee_id: int):
        try:
            container.employee_service.delete_employee(current_role=current_role(), employee_id=employee_id)
            flash("Employee removed.", "success")
        except AuthorizationError as e:
            flash(str(e), "danger")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("remove employee %s failed", employee_id)
            flash("System error while removing the employee", "danger")
        return redirect(url_for("employees"))
