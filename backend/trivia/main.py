import os

from flask import Blueprint, jsonify, current_app, send_from_directory

main = Blueprint('main', __name__)

@main.route('/')
def index():
    static_dir = current_app.static_folder
    if static_dir and os.path.isfile(os.path.join(static_dir, 'index.html')):
        return send_from_directory(static_dir, 'index.html')
    return jsonify({'message': 'Welcome to the trivia quiz server!'})
