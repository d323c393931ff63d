# Prompt and tool definitions used by the patient message extractor.

from .models import Intent


SYSTEM_PROMPT_RECEPTIONIST = """You are a helpful, polite medical receptionist AI assistant for an Australian GP clinic.
You answer basic questions, take appointment requests, and relay messages.
Never give medical advice. Be warm, professional, and respectful."""


PARSE_PATIENT_MESSAGE_TOOL = {
    "name": "parse_patient_message",
    "description": "Extracts structured info from a patient's message",
    "parameters": {
        "type": "object",
        "properties": {
            "intent": {
                "type": "string",
                "enum": [i.value for i in Intent],
                "description": "Type of the inquiry",
            },
            "name": {
                "type": "string",
                "description": "Full name of the patient",
            },
            "phone": {
                "type": "string",
                "description": "Phone number of the patient",
            },
            "doctor": {
                "type": "string",
                "description": "Doctor requested, if mentioned",
            },
            "preferred_time": {
                "type": "string",
                "description": "Preferred time and day of appointment",
            },
            "reason": {
                "type": "string",
                "description": "Reason for the appointment or message",
            },
        },
        "required": ["intent", "name", "phone"],
    },
}
