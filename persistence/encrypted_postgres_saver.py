import logging
import pickle
from typing import Any, Dict, Iterable

from langgraph.checkpoint.postgres import PostgresSaver
from langchain_core.runnables import RunnableConfig
from langgraph.checkpoint.base import (
    ChannelVersions,
    Checkpoint,
    CheckpointMetadata,
    CheckpointTuple,
)

from .crypto import CryptoUtils

logger = logging.getLogger(__name__)


def channel_aad(config: RunnableConfig) -> bytes:
    thread_id = config["configurable"]["thread_id"]
    checkpoint_ns = config["configurable"].get("checkpoint_ns", "")
    return f"{thread_id}|{checkpoint_ns}|channel_values".encode("utf-8")


def encrypt_channel_values(
    channel_values: Dict[str, Any], encrypt_keys: Iterable[str], aad: bytes
) -> Dict[str, Any]:
    encrypt_keys = set(encrypt_keys)
    new_cv = {}

    for k, v in channel_values.items():
        if CryptoUtils.should_encrypt(k, encrypt_keys):
            raw = pickle.dumps(v, protocol=pickle.HIGHEST_PROTOCOL)
            enc = CryptoUtils.encrypt_bytes(raw, aad + b"|" + k.encode())
            new_cv[k] = {"__enc__": enc, "__fmt__": "pickle"}
        else:
            new_cv[k] = v

    return new_cv


def decrypt_channel_values(channel_values: Dict[str, Any], aad: bytes) -> Dict[str, Any]:
    new_cv = {}

    for k, v in channel_values.items():
        if isinstance(v, dict) and "__enc__" in v:
            raw = CryptoUtils.decrypt_bytes(v["__enc__"], aad + b"|" + k.encode())
            new_cv[k] = pickle.loads(raw)
        else:
            new_cv[k] = v

    return new_cv


class EncryptedPostgresSaver(PostgresSaver):
    """
    PostgresSaver that keeps the sensitive form channels (values typed by the
    user, the last raw event) encrypted at rest.
    """

    def put(
        self,
        config: RunnableConfig,
        checkpoint: Checkpoint,
        metadata: CheckpointMetadata,
        new_versions: ChannelVersions,
    ) -> RunnableConfig:
        encrypt_keys = config["configurable"].get("encrypt_keys", [])

        cp = dict(checkpoint)
        cp["channel_values"] = encrypt_channel_values(
            cp.get("channel_values", {}), encrypt_keys, channel_aad(config)
        )

        logger.debug(
            "checkpoint for thread %s, encrypted channels: %s",
            config["configurable"]["thread_id"],
            sorted(set(encrypt_keys) & set(cp["channel_values"])),
        )
        return super().put(config, cp, metadata, new_versions)

    def _decrypt_tuple(self, config: RunnableConfig, t: CheckpointTuple) -> CheckpointTuple:
        cv = t.checkpoint.get("channel_values", {})
        if not isinstance(cv, dict):
            return t

        new_cp = dict(t.checkpoint)
        new_cp["channel_values"] = decrypt_channel_values(cv, channel_aad(config))

        return t._replace(checkpoint=new_cp)

    def get_tuple(self, config: RunnableConfig):
        t = super().get_tuple(config)
        if t is None:
            return None
        return self._decrypt_tuple(config, t)

    def list(self, config: RunnableConfig, *args, **kwargs):
        for t in super().list(config, *args, **kwargs):
            yield self._decrypt_tuple(t.config, t)
