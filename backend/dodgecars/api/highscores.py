from flask import Blueprint, jsonify, request, current_app
from dodgecars.services import ScoreRejected

highscores = Blueprint('highscores', __name__)


@highscores.route('/highscores', methods=['GET'])
def get_high_scores():
    """Returns the leaderboard, highest score first."""
    return jsonify(current_app.extensions['relay'].high_scores()), 200


@highscores.route('/highscores', methods=['POST'])
def submit_high_score():
    """
    Submits a new high score and broadcasts the updated table to every
    connected client.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    try:
        entry = current_app.extensions['relay'].submit_score(data.get('name'), data.get('score'))
    except ScoreRejected as exc:
        return jsonify({'message': exc.message}), 400

    return jsonify({
        'message': 'High score submitted successfully!',
        'score': entry.to_dict()
    }), 201
