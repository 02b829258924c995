from flask import Blueprint, render_template
from pocketcalc.projects.registry import get_homepage_items

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    projects = get_homepage_items()

    return render_template('index.html', projects=projects)

@main_bp.app_errorhandler(404)
def page_not_found(e):
    return render_template('404.html'), 404
