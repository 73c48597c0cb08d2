import argparse
import json
import sys
from pathlib import Path

from config.settings import get_settings
from db import schema
from db.connection import get_connection
from db.repos.shares_repo import SharesRepo
from models.shared_recommendation import CoachSnapshot
from pipelines.match_coaches import run_match
from services.coach_dataset import get_dataset
from services.errors import CoachMatcherError
from services.llm_client import LLMClient
from services.share_service import create_share, get_share, snapshots_from_coach_ids, summarize_requirements
from utils.logging_setup import init_logging


def _read_request_text(args) -> str:
	if args.input:
		return Path(args.input).read_text(encoding="utf-8")
	if args.text:
		return args.text
	return sys.stdin.read()


def cmd_bootstrap(args):
	conn = get_connection(args.db)
	try:
		schema.bootstrap(conn)
		print(f"Schema ready ({SharesRepo(conn).count()} shares)")
	finally:
		conn.close()


def cmd_match(args):
	settings = get_settings()
	dataset = get_dataset(args.coaches)
	response = run_match(
		_read_request_text(args),
		coaches=dataset,
		llm=LLMClient(settings),
		active_only=not args.include_inactive,
		num_matches=args.num,
		settings=settings,
	)
	out = response.model_dump(mode="json")
	if args.share:
		snapshots = [CoachSnapshot.from_recommendation(r) for r in response.recommendations]
		conn = get_connection(args.db)
		try:
			schema.bootstrap(conn)
			slug = create_share(SharesRepo(conn), snapshots, summarize_requirements(response.parsed_requirements))
		finally:
			conn.close()
		out["share"] = {"slug": slug, "url": f"{settings.public_base_url}/share/{slug}"}
	print(json.dumps(out, indent=2, ensure_ascii=False))


def cmd_share(args):
	settings = get_settings()
	dataset = get_dataset(args.coaches)
	snapshots = snapshots_from_coach_ids(args.coach_id or [], dataset)
	conn = get_connection(args.db)
	try:
		schema.bootstrap(conn)
		slug = create_share(SharesRepo(conn), snapshots, args.summary)
	finally:
		conn.close()
	print(json.dumps({"slug": slug, "url": f"{settings.public_base_url}/share/{slug}"}, indent=2))


def cmd_show_share(args):
	conn = get_connection(args.db)
	try:
		schema.bootstrap(conn)
		share = get_share(SharesRepo(conn), args.slug)
	finally:
		conn.close()
	if share is None:
		print("Share not found")
		return 1
	print(json.dumps(share.model_dump(mode="json"), indent=2, ensure_ascii=False))
	return 0


def cmd_serve(args):
	import uvicorn

	uvicorn.run("api.app:create_app", factory=True, host=args.host, port=args.port)


def main():
	settings = get_settings()
	init_logging(settings.log_level)
	parser = argparse.ArgumentParser(description="Coach matcher CLI")
	parser.add_argument("--db", default=settings.db_path, help="Path to SQLite share DB (default from settings)")
	parser.add_argument("--coaches", default=settings.coaches_path, help="Path to coach dataset JSON (default from settings)")
	sub = parser.add_subparsers(dest="cmd", required=True)

	p_boot = sub.add_parser("bootstrap", help="Create the share table")
	p_boot.set_defaults(func=cmd_bootstrap)

	p_match = sub.add_parser("match", help="Rank coaches for a free-text request")
	src = p_match.add_mutually_exclusive_group()
	src.add_argument("--text", "-t", help="Request text (default: read stdin)")
	src.add_argument("--input", "-i", help="Path to a file holding the request text")
	p_match.add_argument("--num", "-n", type=int, default=None, help=f"Recommendations to return (default: {settings.default_num_matches})")
	p_match.add_argument("--include-inactive", action="store_true", help="Also match coaches flagged inactive")
	p_match.add_argument("--share", action="store_true", help="Persist all recommendations behind a share link")
	p_match.set_defaults(func=cmd_match)

	p_share = sub.add_parser("share", help="Create a share link for coach ids")
	p_share.add_argument("--coach-id", "-c", action="append", help="Coach id to include (repeatable)")
	p_share.add_argument("--summary", help="Optional request summary shown on the share page")
	p_share.set_defaults(func=cmd_share)

	p_show = sub.add_parser("show-share", help="Print a stored share by slug")
	p_show.add_argument("slug")
	p_show.set_defaults(func=cmd_show_share)

	p_serve = sub.add_parser("serve", help="Run the HTTP API")
	p_serve.add_argument("--host", default=settings.host)
	p_serve.add_argument("--port", type=int, default=settings.port)
	p_serve.set_defaults(func=cmd_serve)

	args = parser.parse_args()
	try:
		code = args.func(args)
	except CoachMatcherError as e:
		print(f"Error: {e.client_message()}", file=sys.stderr)
		sys.exit(2 if e.status_code == 400 else 1)
	if code:
		sys.exit(code)


if __name__ == "__main__":
	main()
