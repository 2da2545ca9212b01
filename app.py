import logging
import os

from flask import Flask, jsonify, render_template, request
from flask_cors import CORS

from explorer import explore, load_attribute_labels, load_catalog, load_maps, summarize
from itemcatalog.config import DEFAULT_MAP_ID
from itemcatalog.ddragon import item_image_url
from itemcatalog.sorting import SortSpec, request_sort, select_attribute_sort

app = Flask(__name__)
app.logger.setLevel(logging.INFO)
CORS(app)


def _map_id():
    return request.args.get("map", DEFAULT_MAP_ID)


def _refresh():
    return request.args.get("refresh", "false").lower() == "true"


def _catalog(map_id):
    try:
        return load_catalog(map_id, refresh=_refresh())
    except Exception:
        app.logger.exception("Error building catalog for map %s", map_id)
        return []


def _selected_ids():
    if request.method == "POST":
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")
        ids = data.get("ids") or []
        if not isinstance(ids, list):
            raise ValueError("'ids' must be a list")
        return [str(item_id) for item_id in ids]
    raw = request.args.get("ids", "")
    return [item_id for item_id in raw.split(",") if item_id]


@app.route('/')
def home():
    return render_template('index.html')


@app.route('/api/maps')
def maps():
    return jsonify(load_maps(refresh=_refresh()))


@app.route('/api/items')
def items():
    map_id = _map_id()
    query = request.args.get("q", "")

    try:
        spec = SortSpec.parse(request.args)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    results = explore(_catalog(map_id), query, spec)
    app.logger.info("Returning %d items for map %s", len(results), map_id)

    return jsonify(
        {
            "map": map_id,
            "query": query,
            "sort": spec.as_dict(),
            "count": len(results),
            "items": [dict(item, image_url=item_image_url(item)) for item in results],
        }
    )


@app.route('/api/attributes')
def attributes():
    try:
        labels = load_attribute_labels(refresh=_refresh())
    except Exception:
        app.logger.exception("Error listing attribute labels")
        labels = []
    return jsonify(labels)


@app.route('/api/selection', methods=["GET", "POST"])
def selection():
    try:
        ids = _selected_ids()
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(summarize(_catalog(_map_id()), ids))


@app.route('/api/sort', methods=["POST"])
def next_sort():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    try:
        spec = SortSpec.parse(data.get("spec"))
        if "attribute" in data:
            spec = select_attribute_sort(data.get("attribute"))
        elif "key" in data:
            spec = request_sort(spec, str(data["key"]))
        else:
            return jsonify({"error": "Missing 'key' or 'attribute'"}), 400
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(spec.as_dict())


if __name__ == '__main__':
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port)
