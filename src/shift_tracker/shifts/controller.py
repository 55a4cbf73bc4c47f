from __future__ import annotations

import traceback

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.formatting import format_currency, format_hours
from ..container import Container
from ..core.exceptions import DomainError, NotFoundError
from .forms import shift_from_form


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    def _system_error(action: str, e: Exception) -> None:
        traceback.print_exc()
        if bool(app.config.get("DEBUG", False)):
            flash(f"System error while {action}: {e}", "danger")
        else:
            flash(f"System error while {action}", "danger")

    def _editor(shift, *, is_new: bool):
        try:
            hours = shift.hours
        except DomainError:
            hours = 0.0
        # one blank coworker/party row so the user can add another
        return render_template(
            "shift_form.html",
            shift=shift.with_new_coworker().with_new_party(),
            hours=hours,
            is_new=is_new,
        )

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        shifts = container.shifts_repo.list_all()
        stats = container.statistics_service.dashboard(shifts)
        dashboard = {
            "total_earnings": format_currency(stats.total_earnings),
            "total_hours": format_hours(stats.total_hours),
            "shift_count": stats.shift_count,
            "average_hourly": format_currency(stats.average_hourly_with_tips),
            "this_week_earnings": format_currency(stats.this_week_earnings),
            "this_week_shift_count": stats.this_week_shift_count,
        }
        return render_template(
            "index.html",
            dashboard=dashboard,
            shifts=container.shift_service.list_for_display(),
        )

    @app.route("/shifts/new", methods=["GET", "POST"], endpoint="shift_new")
    def shift_new():
        if request.method == "POST":
            shift_id = request.form.get("id") or container.shift_service.new_shift().id
            try:
                shift = shift_from_form(request.form, shift_id)
            except DomainError as e:
                flash(str(e), "danger")
                return _editor(shift_from_form(request.form, shift_id, strict=False), is_new=True)

            try:
                container.shift_service.create(shift)
                flash("Shift saved.", "success")
                return redirect(url_for("index"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception as e:
                _system_error("saving the shift", e)
            return _editor(shift, is_new=True)

        return _editor(container.shift_service.new_shift(), is_new=True)

    @app.route("/shifts/<shift_id>/edit", methods=["GET", "POST"], endpoint="shift_edit")
    def shift_edit(shift_id: str):
        try:
            existing = container.shift_service.get(shift_id)
        except NotFoundError as e:
            flash(str(e), "danger")
            return redirect(url_for("index"))

        if request.method == "POST":
            try:
                shift = shift_from_form(request.form, shift_id)
            except DomainError as e:
                flash(str(e), "danger")
                return _editor(shift_from_form(request.form, shift_id, strict=False), is_new=False)

            try:
                container.shift_service.update(shift)
                flash("Shift updated.", "success")
                return redirect(url_for("index"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception as e:
                _system_error("updating the shift", e)
            return _editor(shift, is_new=False)

        return _editor(existing, is_new=False)

    @app.route("/shifts/<shift_id>/delete", methods=["POST"], endpoint="shift_delete")
    def shift_delete(shift_id: str):
        try:
            container.shift_service.delete(
                shift_id=shift_id,
                confirmed=request.form.get("confirm") == "yes",
            )
            flash("Shift deleted.", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception as e:
            _system_error("deleting the shift", e)

        return redirect(url_for("index"))
