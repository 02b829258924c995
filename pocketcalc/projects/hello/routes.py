from flask import Blueprint, jsonify

hello_bp = Blueprint('hello', __name__)

GREETING = "Hello from the backend API!"


@hello_bp.route('/api/hello')
def hello():
    """Static JSON greeting"""
    return jsonify({'message': GREETING})
