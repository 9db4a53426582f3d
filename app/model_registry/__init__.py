# app/model_registry/__init__.py


# Register all models here

# User models
from app.users.user_models.user_model import User

# Medical models
from app.medical_models.body_system_model.body_system_model import BodySystem
from app.medical_models.disease_model.disease_model import Disease
from app.medical_models.symptom_model.symptom_model import Symptom
from app.medical_models.chat_history_model.chat_history_model import ChatHistory
from app.medical_models.article_model.article_model import Article
from app.medical_models.resource_model.resource_model import Resource
