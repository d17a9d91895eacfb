"""
Routes package for the decision criteria API.
"""
from flask import Blueprint

criteria_bp = Blueprint('criteria', __name__, url_prefix='')

from . import criteria_routes
