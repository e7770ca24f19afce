import json
import traceback
import urllib.parse
import uuid
from pymongo import MongoClient
from pymongo.errors import ConfigurationError, PyMongoError, ServerSelectionTimeoutError
from shop.config import get_data_json, get_db_name, get_mongo_uri
from shop.directory import Directory, normalize_email

COLLECTIONS = ("customers", "users")
AVATAR_URL = "https://ui-avatars.com/api/?name={name}&background=random"


def _mask_uri(uri):
    try:
        if "@" in uri and "://" in uri:
            scheme, rest = uri.split("://", 1)
            creds, host = rest.split("@", 1)
            user = creds.split(":", 1)[0]
            return f"{scheme}://{user}:***@{host}"
        return uri
    except ValueError:
        return uri


def _empty():
    return {"customers": [], "users": []}


def get_mongo_client():
    uri = get_mongo_uri()
    if not uri:
        print("data_store: MONGO_URI not set, using local JSON fallback")
        return None

    try:
        # short server selection timeout so a dead cluster fails fast
        client = MongoClient(uri, serverSelectionTimeoutMS=5000)
        client.admin.command("ping")
        return client
    except ConfigurationError as e:
        print("data_store: configuration error for URI:", _mask_uri(uri), e)
        if "DNS" in str(e) or "_mongodb._tcp" in str(e):
            print("data_store: SRV DNS lookup failed; mongodb+srv:// URIs need dnspython")
        return None
    except ServerSelectionTimeoutError as e:
        print("data_store: cannot reach server:", _mask_uri(uri), e)
        return None
    except PyMongoError as e:
        print("data_store: pymongo error:", e)
        return None


def get_db(client=None):
    if client is None:
        client = get_mongo_client()
    if client is None:
        return None
    return client[get_db_name()]


def ensure_collections(db):
    if db is None:
        return
    try:
        db.customers.create_index("email_key", unique=True)
        db.users.create_index("email_key", unique=True)
    except PyMongoError as e:
        print("data_store: ensure_collections error:", e)


# JSON fallback load/save helpers
def _load_from_json():
    path = get_data_json()
    if not path.exists():
        return _empty()
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    for name in COLLECTIONS:
        data.setdefault(name, [])
    return data


def _save_to_json(data):
    path = get_data_json()
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=4)


def _strip_mongo_fields(doc):
    doc = doc.copy()
    doc.pop("_id", None)
    doc.pop("email_key", None)
    return doc


def _to_docs(records):
    docs = []
    for r in records:
        doc = dict(r)
        doc["email_key"] = normalize_email(doc.get("email"))
        docs.append(doc)
    return docs


def load_data():
    """Return {"customers": [...], "users": [...]} as plain dicts."""
    db = get_db()
    if db is None:
        return _load_from_json()

    try:
        data = _empty()
        existing = db.list_collection_names()
        for name in COLLECTIONS:
            if name in existing:
                data[name] = [_strip_mongo_fields(d) for d in db[name].find({})]
        return data
    except PyMongoError as e:
        print("load_data: failed to load from MongoDB, falling back to JSON:", e)
        traceback.print_exc()
        return _load_from_json()


def save_data(data):
    db = get_db()
    if db is None:
        _save_to_json(data)
        return

    try:
        for name in COLLECTIONS:
            db[name].delete_many({})
            docs = _to_docs(data.get(name, []))
            if docs:
                db[name].insert_many(docs, ordered=False)
    except PyMongoError as e:
        print("save_data: failed to write to MongoDB, saving to JSON as fallback:", e)
        traceback.print_exc()
        _save_to_json(data)


def find_customer(data, email):
    return Directory(customers=data.get("customers", [])).find(email)


def find_user(data, email):
    return Directory(users=data.get("users", [])).find(email)


def new_customer(registration):
    """
    Build a customer from a successful registration.
    registration: {name, email, phone}; id and avatar are assigned here.
    """
    name = registration.get("name", "")
    return {
        "id": uuid.uuid4().hex,
        "name": name,
        "email": registration.get("email", ""),
        "phone": registration.get("phone", ""),
        "avatar_url": AVATAR_URL.format(name=urllib.parse.quote(name or "?")),
    }


def add_customer(data, registration):
    """Append a new customer to an in-memory directory; caller still has to persist it."""
    customer = new_customer(registration)
    data.setdefault("customers", []).append(customer)
    return customer


def _upsert_customer_json(customer):
    data = _load_from_json()
    key = normalize_email(customer.get("email"))
    data["customers"] = [c for c in data["customers"] if normalize_email(c.get("email")) != key]
    data["customers"].append(customer)
    _save_to_json(data)


def upsert_customer(customer):
    """Write one customer keyed by lowercased email, leaving the other records alone."""
    db = get_db()
    if db is None:
        _upsert_customer_json(customer)
        return
    doc = _to_docs([customer])[0]
    try:
        db.customers.replace_one({"email_key": doc["email_key"]}, doc, upsert=True)
    except PyMongoError as e:
        print("upsert_customer: failed to write to MongoDB, saving to JSON as fallback:", e)
        traceback.print_exc()
        _upsert_customer_json(customer)


def migrate_json_to_mongo(db, overwrite=False):
    if db is None:
        print("migrate_json_to_mongo: no db provided")
        return
    path = get_data_json()
    if not path.exists():
        print("migrate_json_to_mongo: json file not found:", path)
        return
    data = _load_from_json()
    try:
        for name in COLLECTIONS:
            if overwrite:
                db[name].delete_many({})
            docs = _to_docs(data.get(name, []))
            if docs:
                try:
                    db[name].insert_many(docs, ordered=False)
                except PyMongoError as e:
                    # duplicates on email_key are expected when not overwriting
                    print(f"migrate_json_to_mongo: {name}: {e}")
        print("migrate_json_to_mongo: migration completed")
    except PyMongoError as e:
        print("migrate_json_to_mongo: migration failed:", e)
        traceback.print_exc()


def init_db(migrate=False, overwrite=False):
    db = get_db()
    ensure_collections(db)
    if migrate and db is not None:
        migrate_json_to_mongo(db, overwrite=overwrite)
    return db

# Database notes
# - Default database name: "mari-zap-shop" (override with MONGO_DB)
# - Collections:
#     - customers : id, name, email, phone, avatar_url, email_key (lowercased email, unique)
#     - users     : staff accounts; email, name, role, email_key (unique)
# - Without MONGO_URI everything lives in SHOP_DATA_JSON (default shop/data.json)
