"""
Calculator - keypad page plus a small JSON API.
The calculator state lives in the visitor's session; nothing is stored server-side.
"""

import logging

from flask import Blueprint, abort, jsonify, redirect, render_template, request, session, url_for

from pocketcalc import csrf
from pocketcalc.projects.calculator.core.keys import KEYPAD_ROWS, UnknownKeyError
from pocketcalc.projects.calculator.core.state import CalculatorState, press
from pocketcalc.utils.logging import log_project_visit

logger = logging.getLogger(__name__)

SESSION_KEY = 'calculator_state'

# Session cookies over ~4 KB are dropped by browsers
DISPLAY_WARNING_LENGTH = 3000

calculator_bp = Blueprint('calculator', __name__,
                          template_folder='templates')


def _load_state():
    return CalculatorState.from_dict(session.get(SESSION_KEY))


def _save_state(state):
    if len(state.display) > DISPLAY_WARNING_LENGTH:
        logger.warning(
            f"Calculator display is {len(state.display)} characters; "
            f"the session cookie may exceed the browser's 4 KB limit and be dropped"
        )
    session[SESSION_KEY] = state.to_dict()


def _state_payload(state):
    return {
        'display': state.screen,
        'raw_display': state.display,
        'operator': state.operator.value if state.operator else None,
        'awaiting_operand': state.awaiting_operand,
    }


@calculator_bp.route('/')
def index():
    """Display the calculator keypad"""
    log_project_visit('calculator', 'Calculator')
    state = _load_state()
    return render_template('calculator.html', state=state, keypad_rows=KEYPAD_ROWS)


@calculator_bp.route('/press', methods=['POST'])
def press_key():
    """Apply one keypad button from the HTML form, then redirect back"""
    label = request.form.get('label', '')
    state = _load_state()
    try:
        press(state, label)
    except UnknownKeyError as e:
        logger.warning(f"Rejected keypad press: {e}")
        abort(400)
    _save_state(state)
    return redirect(url_for('calculator.index'))


@calculator_bp.route('/api/state', methods=['GET'])
def api_state():
    """Current display and pending operator for this session"""
    return jsonify(_state_payload(_load_state()))


@calculator_bp.route('/api/press', methods=['POST'])
@csrf.exempt
def api_press():
    """Apply {"label": ...} or {"labels": [...]} and return the new state"""
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400

    if 'labels' in data:
        labels = data['labels']
        if not isinstance(labels, list):
            return jsonify({'error': 'labels must be a list'}), 400
    elif 'label' in data:
        labels = [data['label']]
    else:
        return jsonify({'error': 'Missing label'}), 400

    state = _load_state()
    try:
        for label in labels:
            press(state, label)
    except UnknownKeyError as e:
        # Nothing is saved, so a rejected batch leaves the session untouched
        return jsonify({'error': str(e)}), 400

    _save_state(state)
    return jsonify(_state_payload(state))


@calculator_bp.route('/api/clear', methods=['POST'])
@csrf.exempt
def api_clear():
    """Reset this session's calculator"""
    state = CalculatorState()
    _save_state(state)
    return jsonify(_state_payload(state))
