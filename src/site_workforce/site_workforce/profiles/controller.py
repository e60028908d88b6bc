from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.web import current_user, current_user_id, login_required, store_session_user
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "user_id" in session:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.auth_service.authenticate(email, password)

                session.permanent = bool(remember)
                store_session_user(s_user)

                flash(f"Welcome back, {s_user.name}!", "success")
                return redirect(url_for("dashboard"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception as e:
                app.logger.exception("login failed")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error during sign in: {e}", "danger")
                else:
                    flash("System error during sign in", "danger")

        return render_template("login.html")

    @app.route("/signup", methods=["GET", "POST"], endpoint="signup")
    def signup():
        if request.method == "POST":
            try:
                container.auth_service.sign_up(
                    email=request.form.get("email", ""),
                    password=request.form.get("password", ""),
                    name=request.form.get("name", ""),
                    role=Role.SUPERVISOR,
                    site_location=request.form.get("site_location", ""),
                )
                flash("Account created. You can sign in now.", "success")
                return redirect(url_for("login"))
            except ValidationError as e:
                flash(str(e), "warning")
            except Exception:
                app.logger.exception("sign up failed")
                flash("System error while creating the account", "danger")

        return render_template("signup.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been successfully logged out.", "info")
        return redirect(url_for("login"))

    @app.route("/profile", methods=["GET", "POST"], endpoint="profile")
    @login_required
    def profile():
        if request.method == "POST":
            try:
                s_user = container.profile_service.update_profile(
                    user_id=current_user_id(),
                    name=request.form.get("name", ""),
                    email=request.form.get("email", ""),
                    site_location=request.form.get("site_location"),
                )
                store_session_user(s_user)
                flash("Profile updated.", "success")
                return redirect(url_for("profile"))
            except ValidationError as e:
                flash(str(e), "warning")
            except Exception:
                app.logger.exception("profile update failed")
                flash("Failed to update profile", "danger")

        user = container.profile_service.get_profile(current_user_id())
        return render_template("profile.html", user=user, current_user=current_user(), active_page="profile")
