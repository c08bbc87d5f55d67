from __future__ import annotations

from flask import Flask, abort, jsonify, request

from ..container import Container
from ..core.enums import DateBucket, RecordKind
from ..core.exceptions import ValidationError
from ..records.model import Record
from .viewmodel import RecordListViewModel


def register(app: Flask, container: Container) -> None:
    def _list(kind: str) -> RecordListViewModel:
        try:
            return container.list_for(RecordKind(kind))
        except ValueError:
            abort(404)

    def _bad_request(message: str):
        return jsonify({"success": False, "message": message}), 400

    def _json_object():
        body = request.get_json(silent=True)
        if body is None:
            return {}
        return body if isinstance(body, dict) else None

    @app.route("/api/<kind>", methods=["GET"], endpoint="record_list")
    def record_list(kind: str):
        return jsonify(_list(kind).snapshot())

    @app.route("/api/<kind>/load", methods=["POST"], endpoint="record_list_load")
    async def record_list_load(kind: str):
        vm = _list(kind)
        await vm.load()
        return jsonify(vm.snapshot())

    @app.route("/api/<kind>/refresh", methods=["POST"], endpoint="record_list_refresh")
    async def record_list_refresh(kind: str):
        vm = _list(kind)
        await vm.refresh()
        return jsonify(vm.snapshot())

    @app.route("/api/<kind>/search", methods=["PUT"], endpoint="record_list_search")
    def record_list_search(kind: str):
        vm = _list(kind)
        body = _json_object()
        if body is None:
            return _bad_request("Body must be a JSON object")
        vm.set_search(str(body.get("text") or ""))
        return jsonify(vm.snapshot())

    @app.route("/api/<kind>/filter", methods=["PUT"], endpoint="record_list_filter")
    def record_list_filter(kind: str):
        vm = _list(kind)
        body = _json_object()
        if body is None:
            return _bad_request("Body must be a JSON object")
        try:
            vm.set_filter(DateBucket.parse(str(body.get("bucket") or "")))
        except ValidationError as e:
            return _bad_request(str(e))
        return jsonify(vm.snapshot())

    @app.route("/api/<kind>/inject", methods=["POST"], endpoint="record_list_inject")
    def record_list_inject(kind: str):
        vm = _list(kind)
        try:
            record = Record.from_payload(request.get_json(silent=True), vm.kind)
        except ValidationError as e:
            return _bad_request(str(e))
        merged = vm.merge_injected(record)
        return jsonify({"success": True, "merged": merged, **vm.snapshot()})

    @app.route("/api/filters", methods=["GET"], endpoint="filter_options")
    def filter_options():
        return jsonify([{"id": b.option_id, "value": b.value, "title": b.label} for b in DateBucket])
