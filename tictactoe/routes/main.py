from flask import Blueprint, jsonify, redirect, request, url_for

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    return redirect(url_for('tic_tac_toe.index'))

@main_bp.app_errorhandler(404)
def page_not_found(e):
    if '/api/' in request.path:
        return jsonify({'error': 'Not found'}), 404
    return '<h1>Page not found</h1>', 404
