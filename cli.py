from __future__ import annotations

import argparse
import json
import logging

import uvicorn

from visualizer.model import ProjectConfig
from visualizer.project import Project
from visualizer.summarize import load_and_summarize


def _build_config(args: argparse.Namespace) -> ProjectConfig:
	if args.config:
		with open(args.config, "r", encoding="utf-8") as fh:
			config = ProjectConfig.model_validate_json(fh.read())
	else:
		config = ProjectConfig()
	return ProjectConfig(
		include=config.include + (args.include or []),
		require=config.require + (args.require or []),
	)


def cmd_load(args: argparse.Namespace) -> None:
	project = Project(_build_config(args))
	result = load_and_summarize(project)
	print(json.dumps(result.model_dump(mode="json"), indent=2))


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="dm-visualizer")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pl = sub.add_parser("load", help="Load a project and print model facts JSON")
	pl.add_argument("-I", "--include", action="append", metavar="DIR", help="Directory to include")
	pl.add_argument("-r", "--require", action="append", metavar="GLOB", help="Path glob to require")
	pl.add_argument("-c", "--config", help="JSON file with 'include' and 'require' lists")
	pl.set_defaults(func=cmd_load)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv=None) -> None:
	args = build_parser().parse_args(argv)
	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
	args.func(args)


if __name__ == "__main__":
	main()
