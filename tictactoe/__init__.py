from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import os
import logging

load_dotenv()

db = SQLAlchemy()
csrf = CSRFProtect()

def create_app(test_config=None):
    # Validate required environment variables
    if test_config is None:
        required_vars = ['SECRET_KEY']
        for var in required_vars:
            if not os.getenv(var):
                raise ValueError(f"Required environment variable {var} is not set")
    
    app = Flask(__name__)
    app.config.from_object('config')
    if test_config is not None:
        app.config.update(test_config)
    
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    # Initialize extensions
    db.init_app(app)
    csrf.init_app(app)
    
    # Register blueprints
    from tictactoe.routes.main import main_bp
    from tictactoe.game.routes import tic_tac_toe_bp
    
    app.register_blueprint(main_bp)
    app.register_blueprint(tic_tac_toe_bp, url_prefix='/tic-tac-toe')
    
    # Import models to ensure they're known to Flask-SQLAlchemy
    from tictactoe.models import LogEntry
    
    # CLI commands
    from tictactoe.game import commands
    commands.init_app(app)
    
    return app
