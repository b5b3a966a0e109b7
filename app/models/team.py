"""
Team model
"""
from sqlalchemy import Column, Integer, Text, Enum, TIMESTAMP, ForeignKey, CheckConstraint, Uuid, func
from sqlalchemy.orm import relationship
from app.db.database import Base, IdType

PRODUCT_STAGES = ("idea", "prototype", "mvp", "product")


class Team(Base):
    __tablename__ = "team"
    __table_args__ = (
        CheckConstraint("team_size BETWEEN 1 AND 100", name="team_size_check"),
        CheckConstraint("equity_split BETWEEN 1 AND 100", name="equity_split_check"),
        CheckConstraint("LENGTH(product_description) <= 200", name="product_description_check"),
    )

    team_id = Column(IdType, primary_key=True, autoincrement=True)
    product_name = Column(Text, nullable=False)
    team_size = Column(Integer, nullable=False)
    equity_split = Column(Integer, nullable=False)
    product_stage = Column(Enum(*PRODUCT_STAGES, name="product_stage"), nullable=False)
    roles = Column(Text, nullable=False)
    product_description = Column(Text, nullable=False)
    team_leader_id = Column(Uuid, ForeignKey("profiles.profile_id", ondelete="CASCADE"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    team_leader = relationship("Profile")
