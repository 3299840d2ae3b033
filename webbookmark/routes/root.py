from flask import Blueprint, render_template

from webbookmark.models import ARTISTS

root = Blueprint("root", __name__)


@root.route("/")
def home() -> str:
    return render_template("artists.html.j2", artists=ARTISTS)


@root.route("/flask-health-check")
def flask_health_check() -> str:
    return "success"
