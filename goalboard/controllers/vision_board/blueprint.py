from flask import Blueprint

vision_board_bp = Blueprint("vision_board", __name__)
