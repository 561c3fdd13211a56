import logging

from flask import Flask, Blueprint, current_app, jsonify, request

from config import get_config
from constants import MIN_SERVINGS, MAX_INGREDIENTS, VALID_UNIT_SYSTEMS
from services import (
    convert_unit, convert_to_system, display_ingredients,
    format_amount, units_for,
)
from utils import (
    RequestValidationError, safe_int, optional_float,
    clean_unit, clean_name, parse_unit_system,
)

logger = logging.getLogger(__name__)

units_bp = Blueprint('units', __name__, url_prefix='/api')


def _json_body():
    """Get the request JSON body as a dict. An empty body is an empty dict."""
    if not request.get_data():
        return {}
    data = request.get_json(silent=True, force=True)
    if data is None:
        raise RequestValidationError("Request body is not valid JSON")
    if not isinstance(data, dict):
        raise RequestValidationError("Request body must be a JSON object")
    return data


def _servings(value, default):
    return safe_int(value, default=default, min_val=MIN_SERVINGS,
                    max_val=current_app.config['MAX_SERVINGS'])


# ============================================
# ROUTES - UNITS
# ============================================

@units_bp.route('/units')
def units_list():
    category = request.args.get('category') or None
    system = request.args.get('system') or None
    return jsonify({'units': units_for(category=category, system=system)})


@units_bp.route('/units/convert', methods=['POST'])
def units_convert():
    data = _json_body()
    amount = optional_float(data.get('amount'))
    from_unit = clean_unit(data.get('from_unit'))
    to_unit = clean_unit(data.get('to_unit'))

    result = convert_unit(amount, from_unit, to_unit)
    return jsonify({
        'amount': result,
        'display': format_amount(result),
        'unit': to_unit or '',
    })


@units_bp.route('/units/to-system', methods=['POST'])
def units_to_system():
    data = _json_body()
    amount = optional_float(data.get('amount'))
    unit = clean_unit(data.get('unit'))
    system = parse_unit_system(data.get('system'))
    if system is None:
        raise RequestValidationError("system is required")

    result = convert_to_system(amount, unit, system)
    if result is None:
        return jsonify({'amount': None, 'display': '', 'unit': None})
    return jsonify({
        'amount': result['amount'],
        'display': format_amount(result['amount']),
        'unit': result['unit'],
    })


# ============================================
# ROUTES - RECIPE DETAIL
# ============================================

@units_bp.route('/recipe/ingredients/display', methods=['POST'])
def recipe_ingredients_display():
    data = _json_body()

    raw_ingredients = data.get('ingredients', [])
    if not isinstance(raw_ingredients, list):
        raise RequestValidationError("ingredients must be a list")
    if len(raw_ingredients) > MAX_INGREDIENTS:
        raise RequestValidationError(f"At most {MAX_INGREDIENTS} ingredients per request")

    # The recipe's own yield is never clamped; missing or non-positive disables scaling
    original_servings = safe_int(data.get('original_servings'), default=None)
    default_servings = max(original_servings or MIN_SERVINGS, MIN_SERVINGS)
    if data.get('servings') is None:
        servings = default_servings
    else:
        servings = _servings(data.get('servings'), default=default_servings)

    if 'unit_system' in data:
        unit_system = parse_unit_system(data.get('unit_system'))
    else:
        unit_system = current_app.config['DEFAULT_UNIT_SYSTEM'] or None

    ingredients = []
    for item in raw_ingredients:
        if not isinstance(item, dict):
            raise RequestValidationError("Each ingredient must be an object")
        ingredients.append({
            'name': clean_name(item.get('name')),
            'amount': optional_float(item.get('amount')),
            'unit': clean_unit(item.get('unit')),
        })

    return jsonify({
        'original_servings': original_servings,
        'servings': servings,
        'unit_system': unit_system,
        'ingredients': display_ingredients(ingredients, original_servings, servings, unit_system),
    })


@units_bp.errorhandler(RequestValidationError)
def handle_validation_error(error):
    logger.warning("Rejected %s %s: %s", request.method, request.path, error)
    return jsonify({'error': str(error)}), 400


def create_app(env=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    default_system = app.config['DEFAULT_UNIT_SYSTEM']
    if default_system and default_system not in VALID_UNIT_SYSTEMS:
        raise ValueError(f"Invalid DEFAULT_UNIT_SYSTEM: {default_system!r}")

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Register Jinja filter for amount display
    app.jinja_env.filters['amount'] = format_amount

    app.register_blueprint(units_bp)
    return app


app = create_app()


if __name__ == '__main__':
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
