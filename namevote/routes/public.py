from flask import flash, redirect, render_template, request, url_for

from namevote.services import list_names, submit_vote
from namevote.services.device import generate_device_id

VOTE_RECORDED = "Thanks! Your choice was recorded."


def _wants_json():
    return request.headers.get("X-Requested-With") == "XMLHttpRequest"


def register_public_routes(app):
    @app.route("/")
    def index():
        return render_template(
            "index.html",
            names=list_names(),
            fallback_device_id=generate_device_id(),
        )

    @app.route("/vote", methods=["POST"])
    def vote():
        result = submit_vote(request.form, request.headers)

        if _wants_json():
            return result, 200 if result["ok"] else 400

        if result["ok"]:
            flash(VOTE_RECORDED, "success")
        else:
            flash(result["error"], "error")
        return redirect(url_for("index"))

    @app.route("/health")
    def health():
        return {"status": "ok"}
