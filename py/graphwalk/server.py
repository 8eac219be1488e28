"""HTTP query service with Flask."""
import io
import logging

from flask import Flask, jsonify, request

from .cli import COMMANDS, parse_flag, run_command
from .types import GraphError

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    """Create and configure the Flask application.

    Every command of the CLI is available as ``POST /commands/<name>`` with
    the command input (graph plus query parameters) as a plain-text body.

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    @app.route('/commands', methods=['GET'])
    def list_commands():
        """List available commands."""
        return jsonify({'commands': sorted(COMMANDS)}), 200

    @app.route('/commands/<name>', methods=['POST'])
    def execute(name: str):
        """Run a command on the request body."""
        if name not in COMMANDS:
            return jsonify({'error': f'unknown command: {name}'}), 404

        flag = request.args.get('directed')
        directed = None
        if flag is not None:
            try:
                directed = parse_flag(flag)
            except ValueError:
                return jsonify({'error': f'invalid directed flag: {flag}'}), 400

        body = request.get_data(as_text=True)
        try:
            output = run_command(name, io.StringIO(body), directed)
        except GraphError as e:
            logger.info("%s rejected: %s", name, e)
            return jsonify({'error': str(e)}), 400

        return jsonify({'command': name, 'output': output}), 200

    return app
