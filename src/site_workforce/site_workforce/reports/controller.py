from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_optional_date, today_local
from ..common.web import current_scope, current_user, login_required
from ..core.enums import ReportFilter
from ..core.exceptions import NoDataError, ValidationError
from ..container import Container
from .export import export_filename, write_report_csv
from .service import ReportQuery, parse_report_filter


def register(app: Flask, container: Container) -> None:
    def _query_from_args() -> ReportQuery:
        return ReportQuery(
            filter_mode=parse_report_filter(request.args.get("filter")),
            employee_id=request.args.get("employee_id", type=int),
            site=(request.args.get("site") or "").strip() or None,
            start=parse_optional_date(request.args.get("start")),
            end=parse_optional_date(request.args.get("end")),
        )

    @app.route("/reports", methods=["GET"], endpoint="reports")
    @login_required
    def reports():
        scope = current_scope()
        data = None
        employees, sites = [], []
        try:
            employees = container.employee_service.list_for_scope(scope)
            sites = container.report_service.available_sites(scope)
            data = container.report_service.build_report(scope, _query_from_args())
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("load report failed")
            flash("System error while loading the report", "danger")

        return render_template(
            "reports.html",
            data=data,
            args=request.args,
            filters=list(ReportFilter),
            employees=employees,
            sites=sites,
            current_user=current_user(),
            active_page="reports",
        )

    @app.route("/reports/export.csv", methods=["GET"], endpoint="reports_export")
    @login_required
    def reports_export():
        try:
            data = container.report_service.build_report(current_scope(), _query_from_args())
            body = write_report_csv(data.rows)
        except NoDataError as e:
            flash(str(e), "info")
            return redirect(url_for("reports", **request.args))
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("reports", **request.args))
        except Exception:
            app.logger.exception("report export failed")
            flash("System error while exporting the report", "danger")
            return redirect(url_for("reports", **request.args))

        filename = export_filename(today_local())
        return app.response_class(
            body.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
