"""Topic 01: add, fetch, update and delete documents of one type."""

import logging
from dataclasses import asdict, dataclass

import _path_setup  # noqa: F401

from opensearch_type import Client, Document, NotFoundError, Script, load_config

INDEX_NAME = "example-topic-types"
TYPE_NAME = "_doc"


@dataclass
class Note:
    title: str
    category: str
    views: int = 0


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    client = Client(config=load_config(auto_populate=True))
    index = client.get_index(INDEX_NAME)

    if index.exists():
        index.delete()
    index.create(
        mappings={
            "properties": {
                "title": {"type": "text"},
                "category": {"type": "keyword"},
                "views": {"type": "integer"},
            }
        },
    )

    notes = index.get_type(TYPE_NAME, serializer=asdict)

    notes.add_document(notes.create_document("1", {"title": "Basics", "category": "tutorial", "views": 0}))

    generated = Document(data={"title": "No id yet", "category": "guide"})
    notes.add_document(generated)
    print(f"Server assigned id={generated.id} version={generated.version}")

    notes.add_object(Note("Serialized", "guide", views=3))

    success, errors = notes.add_objects([Note("Bulk A", "ops"), Note("Bulk B", "ops")])
    print(f"Bulk indexed: success={success}, errors={len(errors)}")

    notes.update_document(Script("ctx._source.views += 1", id="1", options={"refresh": "true"}))
    print("Fetched:", notes.get_document("1").data)

    notes.delete_by_id("1")
    try:
        notes.get_document("1")
    except NotFoundError as exc:
        print("Gone:", exc)

    index.delete()


if __name__ == "__main__":
    main()
