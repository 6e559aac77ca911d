"""
Admin account operations: validation, creation, verification, lookup, deletion, listing.

An admin is a Firebase Auth user carrying the claims {"admin": True, "role": "ADMIN"}
plus two Firestore documents keyed by its uid: admin_profiles/{uid} and the legacy
admins/{uid}. Auth and Firestore are written in separate steps; a failure after the
user is created leaves it in place (nothing is rolled back).
"""
import logging
from dataclasses import dataclass
from datetime import datetime

from admin_backend import ADMIN_PROFILES, ADMINS
from admin_errors import ValidationError, translate_error

logger = logging.getLogger(__name__)

ADMIN_ROLE = "ADMIN"
ADMIN_CLAIMS = {"admin": True, "role": ADMIN_ROLE}
MIN_PASSWORD_LENGTH = 8


@dataclass
class NewAdmin:
    name: str
    email: str
    password: str


@dataclass
class VerificationReport:
    claims_ok: bool
    profile_ok: bool
    legacy_ok: bool

    @property
    def complete(self):
        return self.claims_ok and self.profile_ok and self.legacy_ok


def _filled(value):
    return isinstance(value, str) and value.strip() != ""


def validate_admin_input(name, email, password):
    """Check the create inputs (first failure wins) and return them trimmed."""
    if not (_filled(name) and _filled(email) and _filled(password)):
        raise ValidationError("Tutti i campi sono obbligatori")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"La password deve essere almeno {MIN_PASSWORD_LENGTH} caratteri")
    if "@" not in email:
        raise ValidationError("Email non valida")
    return NewAdmin(name=name.strip(), email=email.strip(), password=password)


# ---------- Create ----------

def create_identity(backend, new_admin):
    """Create the Auth user. Admin accounts are marked verified up front."""
    user = backend.auth.create_user(
        email=new_admin.email,
        password=new_admin.password,
        display_name=new_admin.name,
        email_verified=True,
    )
    logger.info("auth user created: uid=%s email=%s", user.uid, new_admin.email)
    return user.uid


def grant_admin_claims(backend, uid):
    backend.auth.set_custom_user_claims(uid, dict(ADMIN_CLAIMS))
    logger.info("admin claims set: uid=%s", uid)


def write_admin_documents(backend, uid, new_admin):
    """Write admin_profiles/{uid} and admins/{uid} in a single batch."""
    db = backend.db
    batch = db.batch()
    batch.set(db.collection(ADMIN_PROFILES).document(uid), {
        "name": new_admin.name,
        "email": new_admin.email,
        "createdAt": backend.server_timestamp,
        "role": ADMIN_ROLE,
    })
    batch.set(db.collection(ADMINS).document(uid), {
        "id": uid,
        "name": new_admin.name,
        "email": new_admin.email,
        "password": "",  # never stored
        "createdAt": backend.server_timestamp,
    })
    batch.commit()
    logger.info("admin documents written: uid=%s", uid)


def create_admin_account(backend, name, email, password):
    """Validate, create the user, grant claims, write both documents. Returns (uid, NewAdmin)."""
    new_admin = validate_admin_input(name, email, password)
    uid = create_identity(backend, new_admin)
    grant_admin_claims(backend, uid)
    write_admin_documents(backend, uid, new_admin)
    return uid, new_admin


def verify_admin_account(backend, uid):
    user = backend.auth.get_user(uid)
    claims = user.custom_claims or {}
    profile = backend.db.collection(ADMIN_PROFILES).document(uid).get()
    legacy = backend.db.collection(ADMINS).document(uid).get()
    return VerificationReport(
        claims_ok=bool(claims.get("admin")),
        profile_ok=profile.exists,
        legacy_ok=legacy.exists,
    )


# ---------- Delete ----------

def find_admin_by_email(backend, email):
    try:
        return backend.auth.get_user_by_email(email)
    except Exception as e:
        raise translate_error(e, email=email) from e


def delete_admin_account(backend, uid):
    """Delete the Auth user, then both documents. Documents stay behind if the batch fails."""
    backend.auth.delete_user(uid)
    logger.info("auth user deleted: uid=%s", uid)
    db = backend.db
    batch = db.batch()
    batch.delete(db.collection(ADMIN_PROFILES).document(uid))
    batch.delete(db.collection(ADMINS).document(uid))
    batch.commit()
    logger.info("admin documents deleted: uid=%s", uid)


# ---------- List ----------

def list_admin_users(backend):
    """Users of the first list_users() page whose claims include admin=True."""
    page = backend.auth.list_users()
    return [u for u in page.users if (u.custom_claims or {}).get("admin")]


def format_timestamp(millis):
    if not millis:
        return None
    return datetime.fromtimestamp(millis / 1000).strftime("%d/%m/%Y, %H:%M:%S")


def format_admin_summary(user):
    meta = user.user_metadata
    last_sign_in = format_timestamp(meta.last_sign_in_timestamp) or "Mai"
    return [
        f"Nome: {user.display_name or 'N/A'}",
        f"Email: {user.email}",
        f"UID: {user.uid}",
        f"Email verificata: {'✅' if user.email_verified else '❌'}",
        f"Account disabilitato: {'❌' if user.disabled else '✅ Attivo'}",
        f"Creato: {format_timestamp(meta.creation_timestamp) or 'N/A'}",
        f"Ultimo accesso: {last_sign_in}",
    ]
