"""
Admin account error kinds and Firebase Admin SDK error translation.

Each kind carries a user-facing message, the HTTP status the endpoint answers
with, and an optional hint printed by the console tools.
"""
import re


class AdminAccountError(Exception):
    status = 400
    hint = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(AdminAccountError):
    status = 400


class DuplicateIdentityError(AdminAccountError):
    status = 409
    hint = "Usa un'email diversa o elimina l'utente esistente."

    def __init__(self, message="L'email specificata è già registrata nel sistema."):
        super().__init__(message)


class InvalidEmailError(AdminAccountError):
    status = 400

    def __init__(self, message="L'email specificata non è valida."):
        super().__init__(message)


class WeakPasswordError(AdminAccountError):
    status = 400

    def __init__(self, message="La password è troppo debole (min. 6 caratteri per Firebase Auth)."):
        super().__init__(message)


class SignInMethodDisabledError(AdminAccountError):
    status = 403

    def __init__(self, message=(
        "La creazione di account email/password non è abilitata per il tuo progetto. "
        "Abilitale nella console Firebase sotto \"Authentication\" -> \"Sign-in method\"."
    )):
        super().__init__(message)


class NotFoundError(AdminAccountError):
    status = 404


class UnclassifiedProviderError(AdminAccountError):
    status = 500

    def __init__(self, raw_message):
        super().__init__(f"Errore Firebase Auth: {raw_message}")
        self.raw_message = raw_message


# Auth backend codes as they appear in the SDK message, e.g. "... (OPERATION_NOT_ALLOWED)."
_SERVER_CODE_RE = re.compile(r"\(([A-Z_]+)\)")

_SERVER_CODE_ERRORS = {
    "EMAIL_EXISTS": DuplicateIdentityError,
    "DUPLICATE_EMAIL": DuplicateIdentityError,
    "INVALID_EMAIL": InvalidEmailError,
    "WEAK_PASSWORD": WeakPasswordError,
    "OPERATION_NOT_ALLOWED": SignInMethodDisabledError,
}


def _server_code(message):
    m = _SERVER_CODE_RE.search(message or "")
    return m.group(1) if m else None


def translate_error(exc, email=None):
    """Map any exception raised by a flow to an AdminAccountError."""
    from firebase_admin import auth, exceptions
    from google.api_core.exceptions import GoogleAPICallError

    if isinstance(exc, AdminAccountError):
        return exc
    if isinstance(exc, auth.EmailAlreadyExistsError):
        return DuplicateIdentityError()
    if isinstance(exc, auth.UserNotFoundError):
        if email:
            return NotFoundError(f"Nessun utente registrato con l'email: {email}")
        return NotFoundError("Utente non trovato.")
    if isinstance(exc, exceptions.FirebaseError):
        kind = _SERVER_CODE_ERRORS.get(_server_code(str(exc)))
        if kind:
            return kind()
        return UnclassifiedProviderError(str(exc))
    if isinstance(exc, GoogleAPICallError):
        # Firestore errors carry a gRPC/HTTP code but no Auth server code
        return UnclassifiedProviderError(str(exc))
    if isinstance(exc, ValueError):
        # Admin SDK rejects malformed arguments locally before calling the backend
        text = str(exc).lower()
        if "email" in text:
            return InvalidEmailError()
        if "password" in text:
            return WeakPasswordError()
    return AdminAccountError(str(exc))
