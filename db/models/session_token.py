"""
Persisted session token model.

Holds the public identifier and the hash of the secret verifier; the
verifier itself is never stored.
"""

from sqlalchemy import Column, DateTime, String, Text

from db.engine import Base


class SessionToken(Base):
    __tablename__ = "session_tokens"

    identifier = Column(String(64), primary_key=True)
    verifier_hash = Column(String(64), nullable=False)
    expiration_datetime = Column(DateTime(timezone=True), nullable=False)
    user_id = Column(String(255), nullable=False, index=True)
    details = Column(Text, nullable=False, default="", server_default="")

    def __repr__(self):
        return f"<SessionToken(identifier={self.identifier[:8]}..., user_id={self.user_id})>"
