from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from database import Base

# Audit trail of mutating operations (sales, stock receipts, catalogue edits)
class Log(Base):
    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, index=True)
    ts = Column(DateTime, server_default=func.now(), index=True)

    # Acting staff member, when the request names one
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    action = Column(String(50), index=True)      # e.g. BATCH_CREATE
    resource = Column(String(50), index=True)    # e.g. batches
    status = Column(String(20), index=True)      # SUCCESS / FAIL
    ip = Column(String(64), nullable=True)

    # Ids and amounts relevant to the event
    meta = Column(JSON, nullable=True)

    user = relationship("User", lazy="joined", uselist=False)
