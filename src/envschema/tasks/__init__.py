"""
envschema task collection.

Tasks are collected into a single flat namespace served by the envschema
console script.
"""

from invoke import Collection

from . import check, install, show

namespace = Collection()

for submodule in [install, check, show]:
    submodule_collection = Collection.from_module(submodule)
    for task_name, task in submodule_collection.tasks.items():
        namespace.add_task(task)
