"""
Longeviva - Cloud Functions (Python)
createAdminUser: crea un admin (Firebase Auth + admin_profiles + admins) da una richiesta POST JSON.
"""
import json
import logging

from flask import Flask, request
from firebase_functions import https_fn

from admin_accounts import create_admin_account
from admin_backend import get_backend
from admin_errors import AdminAccountError, UnclassifiedProviderError, translate_error

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _cors_headers():
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
    }


def _json_response(data, status=200):
    headers = {**_cors_headers(), "Content-Type": "application/json; charset=utf-8"}
    return (json.dumps(data, ensure_ascii=False, default=str), status, headers)


@app.route("/", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
def create_admin_route():
    if request.method == "OPTIONS":
        return ("", 204, _cors_headers())
    if request.method != "POST":
        logger.warning("method not allowed: %s", request.method)
        return _json_response({"error": "Metodo non consentito. Usa POST."}, 405)

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    name = data.get("name")
    email = data.get("email")
    password = data.get("password")

    try:
        logger.info("admin creation requested: email=%s", email)
        uid, new_admin = create_admin_account(get_backend(), name, email, password)
    except Exception as e:
        err = translate_error(e)
        # unclassified and non-provider errors: keep the traceback in Cloud Logging
        if isinstance(err, UnclassifiedProviderError) or type(err) is AdminAccountError:
            logger.exception("admin creation failed: %s", err.message)
        else:
            logger.warning("admin creation rejected (%s): %s", err.status, err.message)
        return _json_response({"error": err.message}, err.status)

    logger.info("admin created: uid=%s", uid)
    return _json_response({
        "message": "Admin creato con successo!",
        "uid": uid,
        "email": new_admin.email,
        "name": new_admin.name,
    })


# ---------- Cloud Functions entry point ----------

# CORS headers come from _cors_headers(); preflight is answered by create_admin_route
@https_fn.on_request()
def create_admin_user(req: https_fn.Request) -> https_fn.Response:
    with app.request_context(req.environ):
        return app.full_dispatch_request()
