from flask import flash, redirect, render_template, request, url_for

from namevote.services import add_name, is_admin_key, list_submissions, tally_votes
from namevote.services.submissions import UNAUTHORIZED


def register_admin_routes(app):
    @app.route("/admin")
    def admin_dashboard():
        key = request.args.get("key")
        if not is_admin_key(key):
            return redirect(url_for("index"))

        rows = tally_votes()
        return render_template(
            "admin/dashboard.html",
            admin_key=key,
            rows=rows,
            total_votes=sum(row["count"] for row in rows),
        )

    @app.route("/admin/names", methods=["POST"])
    def admin_add_name():
        result = add_name(request.form)
        key = request.form.get("admin_key")

        if request.headers.get("X-Requested-With") == "XMLHttpRequest":
            if result["ok"]:
                return result, 200
            return result, 401 if result["error"] == UNAUTHORIZED else 400

        if not result["ok"] and result["error"] == UNAUTHORIZED:
            return redirect(url_for("index"))

        if result["ok"]:
            flash("Name added.", "success")
        else:
            flash(result["error"], "error")
        return redirect(url_for("admin_dashboard", key=key))

    @app.route("/secret")
    def admin_submissions():
        key = request.args.get("key")
        if not is_admin_key(key):
            return redirect(url_for("index"))

        return render_template(
            "admin/submissions.html",
            admin_key=key,
            rows=list_submissions(),
        )
