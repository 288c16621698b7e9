"""Shared Firebase app + Firestore client for the Firestore stores."""

from pathlib import Path
from typing import Optional, Union


def firestore_client(
    project_id: Optional[str] = None,
    credentials_path: Optional[Union[Path, str]] = None,
):
    """Initialize the default Firebase app once and return a Firestore client."""
    try:
        import firebase_admin
        from firebase_admin import credentials, firestore
    except ImportError:
        raise ImportError(
            "firebase-admin is required for DATA_SOURCE=firebase. pip install firebase-admin"
        )
    if not firebase_admin._apps:
        if credentials_path:
            cred = credentials.Certificate(str(Path(credentials_path).resolve()))
            opts = {"projectId": project_id} if project_id else None
            firebase_admin.initialize_app(cred, opts)
        else:
            firebase_admin.initialize_app(options={"projectId": project_id} if project_id else None)
    return firestore.client()
