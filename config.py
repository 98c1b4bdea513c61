import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tictactoe.db").replace("postgres://", "postgresql://", 1)
SQLALCHEMY_DATABASE_URI = DATABASE_URL

SECRET_KEY = os.getenv("SECRET_KEY")

# Write accepted moves and jumps to the activity log (visits are always logged)
TIC_TAC_TOE_LOG_MOVES = os.getenv("TIC_TAC_TOE_LOG_MOVES", "1").lower() not in ("0", "false", "no", "off")

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
