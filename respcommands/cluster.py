"""Publish/subscribe and cluster management commands."""

from __future__ import annotations

from typing import Any

from .command import Command, Commander, ReplyKind


class PubSubCommands(Commander):
    """Publishing and publish/subscribe introspection."""

    def publish(self, channel: str, message: Any) -> Command:
        """Post ``message`` to ``channel``."""
        return self._run(ReplyKind.INT, "publish", channel, message)

    def spublish(self, channel: str, message: Any) -> Command:
        return self._run(ReplyKind.INT, "spublish", channel, message)

    def pubsub_channels(self, pattern: str) -> Command:
        args: list[Any] = ["pubsub", "channels"]
        if pattern != "*":
            args.append(pattern)
        return self._run(ReplyKind.STRING_SLICE, *args)

    def pubsub_numsub(self, *args: str) -> Command:
        return self._run(ReplyKind.MAP_STRING_INT, "pubsub", "numsub", *args)

    def pubsub_numpat(self) -> Command:
        return self._run(ReplyKind.INT, "pubsub", "numpat")

    def pubsub_shard_channels(self, pattern: str) -> Command:
        args: list[Any] = ["pubsub", "shardchannels"]
        if pattern != "*":
            args.append(pattern)
        return self._run(ReplyKind.STRING_SLICE, *args)

    def pubsub_shard_numsub(self, *args: str) -> Command:
        return self._run(ReplyKind.MAP_STRING_INT, "pubsub", "shardnumsub", *args)


class ClusterCommands(Commander):
    """CLUSTER subcommands."""

    def cluster_my_shard_id(self) -> Command:
        return self._run(ReplyKind.STRING, "cluster", "myshardid")

    def cluster_slots(self) -> Command:
        return self._run(ReplyKind.CLUSTER_SLOTS, "cluster", "slots")

    def cluster_shards(self) -> Command:
        return self._run(ReplyKind.CLUSTER_SHARDS, "cluster", "shards")

    def cluster_links(self) -> Command:
        return self._run(ReplyKind.CLUSTER_LINKS, "cluster", "links")

    def cluster_nodes(self) -> Command:
        return self._run(ReplyKind.STRING, "cluster", "nodes")

    def cluster_meet(self, host: str, port: str) -> Command:
        return self._run(ReplyKind.STATUS, "cluster", "meet", host, port)

    def cluster_forget(self, node_id: str) -> Command:
        return self._run(ReplyKind.STATUS, "cluster", "forget", node_id)

    def cluster_replicate(self, node_id: str) -> Command:
        return self._run(ReplyKind.STATUS, "cluster", "replicate", node_id)

    def cluster_reset_soft(self) -> Command:
        return self._run(ReplyKind.STATUS, "cluster", "reset", "soft")

    def cluster_reset_hard(self) -> Command:
        return self._run(ReplyKind.STATUS, "cluster", "reset", "hard")

    def cluster_info(self) -> Command:
        return self._run(ReplyKind.STRING, "cluster", "info")

    def cluster_key_slot(self, key: str) -> Command:
        return self._run(ReplyKind.INT, "cluster", "keyslot", key)

    def cluster_get_keys_in_slot(self, slot: int, count: int) -> Command:
        return self._run(
            ReplyKind.STRING_SLICE, "cluster", "getkeysinslot", slot, count
        )

    def cluster_count_failure_reports(self, node_id: str) -> Command:
        return self._run(ReplyKind.INT, "cluster", "count-failure-reports", node_id)

    def cluster_count_keys_in_slot(self, slot: int) -> Command:
        return self._run(ReplyKind.INT, "cluster", "countkeysinslot", slot)

    def cluster_del_slots(self, *args: int) -> Command:
        return self._run(ReplyKind.STATUS, "cluster", "delslots", *args)

    def cluster_del_slots_range(self, min_slot: int, max_slot: int) -> Command:
        """Remove every slot from ``min_slot`` to ``max_slot`` inclusive."""
        return self.cluster_del_slots(*range(min_slot, max_slot + 1))

    def cluster_save_config(self) -> Command:
        return self._run(ReplyKind.STATUS, "cluster", "saveconfig")

    def cluster_slaves(self, node_id: str) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "cluster", "slaves", node_id)

    def cluster_failover(self) -> Command:
        return self._run(ReplyKind.STATUS, "cluster", "failover")

    def cluster_add_slots(self, *args: int) -> Command:
        return self._run(ReplyKind.STATUS, "cluster", "addslots", *args)

    def cluster_add_slots_range(self, min_slot: int, max_slot: int) -> Command:
        """Assign every slot from ``min_slot`` to ``max_slot`` inclusive."""
        return self.cluster_add_slots(*range(min_slot, max_slot + 1))