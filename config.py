# config.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

# --- BASE DE DATOS ---
# En producción apunta a PostgreSQL; en desarrollo se usa un archivo SQLite local
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./notas_credito.db")

# --- API ---
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

# --- AUTENTICACIÓN ---
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "cambiar-en-produccion")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
TOKEN_EXPIRY_DAYS = int(os.getenv("TOKEN_EXPIRY_DAYS", "30"))

# --- LOGGING ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(levelname)s - [%(funcName)s] - %(message)s'

# --- REGLAS DEL FORMULARIO ---
MONTO_MAXIMO = Decimal("999999.99")
