# /app/services/database_helpers/reward_repository_sql.py

from typing import Dict, Optional
from sqlalchemy.orm import Session

from app.db.models.reward_models import Reward


class RewardRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_reward(self, record: Dict, commit: bool = True) -> Reward:
        """
        Inserts a reward row. With `commit=False` the row is only flushed, so a
        duplicate triple raises IntegrityError here while the caller still owns
        the transaction.
        """
        new_reward = Reward(**record)
        self.db.add(new_reward)
        if commit:
            self.db.commit()
        else:
            self.db.flush()
        return new_reward

    def get_reward(self, rewarder_name: str, content_id: str) -> Optional[Reward]:
        return (
            self.db.query(Reward)
            .filter(Reward.rewarder_name == rewarder_name, Reward.content_id == content_id)
            .first()
        )

    def delete_all_rewards(self) -> int:
        count = self.db.query(Reward).delete(synchronize_session=False)
        self.db.commit()
        return count
