"""Small models shared by the fetch and update commands."""

from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """One entry of the API's repository list; only the name is used."""

    model_config = ConfigDict(extra="ignore")

    name: str


class SyncResult(BaseModel):
    """Counters for one clone-github run."""

    checked: int = 0
    cloned: int = 0
