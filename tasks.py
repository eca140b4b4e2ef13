"""Main invoke tasks file. Use `inv --list` to see available tasks."""

from invoke import Collection

from dev import code_tasks, compose_tasks

ns = Collection()
ns.add_collection(Collection.from_module(code_tasks), name="code")
ns.add_collection(Collection.from_module(compose_tasks), name="compose")
