"""Session helpers and role gates shared by the Flask controllers."""

from __future__ import annotations

from functools import wraps

from flask import flash, redirect, render_template, session, url_for

from ..core.enums import Role
from ..profiles.scope import AccessScope


def store_session_user(s_user) -> None:
    session["user_id"] = s_user.user_id
    session["name"] = s_user.name
    session["email"] = s_user.email
    session["role"] = s_user.role.value
    session["site_location"] = s_user.site_location
    session["scope"] = s_user.scope.to_session()


def current_user_id() -> int:
    return int(session["user_id"])


def current_role() -> Role:
    return Role(session.get("role"))


def current_scope() -> AccessScope:
    return AccessScope.from_session(session.get("scope"))


def current_user() -> dict:
    return {
        "name": session.get("name"),
        "role": session.get("role"),
        "site_location": session.get("site_location"),
    }


def render_forbidden():
    return render_template("403.html", current_user=current_user()), 403


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return redirect(url_for("login"))

        if session.get("role") != Role.ADMIN.value:
            return render_forbidden()

        return view(*args, **kwargs)

    return wrapper
