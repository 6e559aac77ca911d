import itertools
from types import SimpleNamespace

import pytest
from firebase_admin import auth

from admin_backend import AdminBackend

SERVER_TIMESTAMP = object()


# ---------- Auth ----------

class FakeAuth:
    """In-memory stand-in for firebase_admin.auth; records every call made."""

    def __init__(self):
        self.users = {}
        self.calls = []
        self._ids = itertools.count(1)

    def create_user(self, email, password, display_name, email_verified):
        self.calls.append(("create_user", email))
        if any(u.email == email for u in self.users.values()):
            raise auth.EmailAlreadyExistsError(
                "The user with the provided email already exists (EMAIL_EXISTS).", None, None
            )
        uid = f"uid_{next(self._ids):03d}"
        self.users[uid] = SimpleNamespace(
            uid=uid,
            email=email,
            display_name=display_name,
            email_verified=email_verified,
            disabled=False,
            custom_claims=None,
            user_metadata=SimpleNamespace(
                creation_timestamp=1700000000000,
                last_sign_in_timestamp=None,
            ),
            password=password,
        )
        return self.users[uid]

    def set_custom_user_claims(self, uid, claims):
        self.calls.append(("set_custom_user_claims", uid))
        self.get_user(uid).custom_claims = claims

    def get_user(self, uid):
        if uid not in self.users:
            raise auth.UserNotFoundError(f"No user record found for the provided user ID: {uid}.")
        return self.users[uid]

    def get_user_by_email(self, email):
        self.calls.append(("get_user_by_email", email))
        for user in self.users.values():
            if user.email == email:
                return user
        raise auth.UserNotFoundError(f"No user record found for the provided email: {email}.")

    def delete_user(self, uid):
        self.calls.append(("delete_user", uid))
        self.get_user(uid)
        del self.users[uid]

    def list_users(self):
        self.calls.append(("list_users", None))
        return SimpleNamespace(users=list(self.users.values()))


# ---------- Firestore ----------

class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, collection, doc_id):
        self.collection = collection
        self.id = doc_id

    def get(self):
        return FakeSnapshot(self.id, self.collection.docs.get(self.id))


class FakeCollectionReference:
    def __init__(self):
        self.docs = {}

    def document(self, doc_id):
        return FakeDocumentReference(self, doc_id)


class FakeBatch:
    def __init__(self, client):
        self.client = client
        self._ops = []

    def set(self, ref, data):
        self._ops.append(("set", ref, data))

    def delete(self, ref):
        self._ops.append(("delete", ref, None))

    def commit(self):
        self.client.commits += 1
        if self.client.commit_error is not None:
            raise self.client.commit_error
        if self.client.fail_commit:
            raise RuntimeError("Firestore batch commit failed")
        for op, ref, data in self._ops:
            if op == "set":
                ref.collection.docs[ref.id] = dict(data)
            else:
                ref.collection.docs.pop(ref.id, None)


class FakeFirestore:
    def __init__(self):
        self._collections = {}
        self.commits = 0
        self.fail_commit = False
        self.commit_error = None

    def collection(self, name):
        if name not in self._collections:
            self._collections[name] = FakeCollectionReference()
        return self._collections[name]

    def batch(self):
        return FakeBatch(self)

    def docs(self, name):
        return self.collection(name).docs


# ---------- Fixtures ----------

@pytest.fixture
def fake_auth():
    return FakeAuth()


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def backend(fake_auth, fake_db):
    return AdminBackend(auth=fake_auth, db=fake_db, server_timestamp=SERVER_TIMESTAMP)


@pytest.fixture
def scripted_prompt():
    """Build a prompt callable answering from a fixed script; asked questions are kept."""
    def build(*answers):
        remaining = list(answers)

        def prompt(question):
            prompt.questions.append(question)
            return remaining.pop(0)

        prompt.questions = []
        return prompt

    return build
