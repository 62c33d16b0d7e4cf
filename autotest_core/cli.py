#!/usr/bin/env python3
"""autotest CLI.

Command-line host for the test generation pipeline.

Usage:
    autotest providers                      # List supported AI providers
    autotest prompts DIR                    # Export the default prompt templates
    autotest run --url URL --username U     # Analyze, generate cases, script and report
    autotest execute SCRIPT                 # Replay the cases saved next to a script
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from autotest_core.config import AutotestSettings, configured_providers, load_provider_config
from autotest_core.context import ProviderHandle, RunContext
from autotest_core.errors import AutotestError, ProviderError
from autotest_core.llm.parsing import is_decode_failure
from autotest_core.llm.providers.factory import list_providers
from autotest_core.testing.execution import PlaywrightExecutor
from autotest_core.testing.models import ExecutionResult, RunConfig, parse_test_cases
from autotest_core.testing.pipeline import PipelineOrchestrator
from autotest_core.testing.prompts import load_prompts, save_prompts
from autotest_core.testing.reporting import summarize_execution, summarize_run
from autotest_core.testing.scripts import ArtifactStore, ScriptGenerator, load_cases
from autotest_core.testing.scripts.storage import CASES_SUFFIX, cases_path_for
from autotest_core.testing.utils import get_logger, timestamp_slug

logger = get_logger(__name__)


def cmd_providers(args):
    """List supported providers."""
    configured = set(configured_providers())
    if args.json:
        print(json.dumps(list_providers(), indent=2, ensure_ascii=False))
        return

    print("Available providers:")
    for entry in list_providers():
        marks = []
        if entry["recommended"]:
            marks.append("recommended")
        if entry["id"] in configured:
            marks.append("configured")
        suffix = f" ({', '.join(marks)})" if marks else ""
        print(f"  - {entry['id']}{suffix}")
        print(f"    {entry['name']}: {entry['description']}")


def cmd_prompts(args):
    """Export prompt templates to a directory."""
    prompts = load_prompts(args.source)
    written = save_prompts(prompts, args.directory)
    for path in written:
        print(f"  {path}")


def _settings(args) -> AutotestSettings:
    settings = AutotestSettings.from_env()
    if getattr(args, "output_dir", None):
        settings.output_dir = args.output_dir
    if getattr(args, "headed", False):
        settings.headless = False
    return settings


async def _report_execution(
    orchestrator: PipelineOrchestrator,
    result: ExecutionResult,
    prompt: str,
) -> str:
    summary = summarize_execution(result)
    try:
        report = await orchestrator.report_execution(result, prompt)
    except ProviderError as e:
        logger.warning(f"Relatorio da IA indisponivel, usando resumo local: {e}")
        return summary
    return f"{report}\n\n---\n\n{summary}"


async def _run(args) -> dict:
    settings = _settings(args)
    vendor = args.provider or settings.provider
    prompts = load_prompts(args.prompts_dir or settings.prompts_dir)

    handle = ProviderHandle()
    handle.select(vendor, load_provider_config(vendor))
    async with handle.open_run(prompts) as context:
        return await _run_pipeline(args, settings, context)


async def _run_pipeline(args, settings: AutotestSettings, context: RunContext) -> dict:
    orchestrator = context.orchestrator()
    prompts = context.prompts

    run_config = RunConfig(
        target_url=args.url,
        username=args.username,
        password=args.password,
        screen_name=args.screen or "",
        test_data=args.test_data,
    )

    run = await orchestrator.run(run_config)
    logger.info(summarize_run(run))
    output = run.to_dict()
    output.pop("analysis", None)

    store = ArtifactStore(settings.output_dir)
    store.ensure_dirs()
    run_path = store.reports_dir / f"run_{timestamp_slug(run.timestamp)}.json"
    run.save(str(run_path))
    output["run"] = str(run_path)

    cases = None
    if run.test_cases is not None:
        if is_decode_failure(run.test_cases):
            output["script_error"] = "AI answer for the test cases could not be decoded"
        else:
            try:
                cases = parse_test_cases(run.test_cases)
            except ValueError as e:
                output["script_error"] = str(e)

    report = run.report or ""
    if cases is None:
        if report:
            output["report"] = str(store.save_report(report))
        return output

    script = ScriptGenerator().generate(run_config, cases)
    script_path = store.save_script(script, cases, run_config=run_config.to_dict())
    output["script"] = str(script_path)

    if args.execute:
        executor = PlaywrightExecutor(
            output_dir=str(settings.output_dir),
            headless=settings.headless,
            timeout=settings.timeout,
            settle_delay_ms=settings.settle_delay_ms,
        )
        async with executor:
            result = await executor.execute(run_config, cases)
        output["execution"] = result.to_dict()
        report = await _report_execution(orchestrator, result, prompts.get("report", ""))

    if report:
        output["report"] = str(store.save_report(report))
    return output


def cmd_run(args):
    """Run the pipeline against a target screen."""
    output = asyncio.run(_run(args))
    print(json.dumps(output, indent=2, ensure_ascii=False, default=str))
    if output.get("error"):
        sys.exit(1)


async def _execute(args) -> dict:
    settings = _settings(args)
    cases = load_cases(args.script)
    if not cases:
        raise AutotestError(f"No saved test cases next to {args.script}")

    cases_file = args.script if args.script.endswith(CASES_SUFFIX) else cases_path_for(args.script)
    with open(cases_file, "r", encoding="utf-8") as f:
        saved_config = json.load(f).get("config") or {}
    if args.password:
        saved_config["password"] = args.password
    run_config = RunConfig.from_dict(saved_config)

    executor = PlaywrightExecutor(
        output_dir=str(settings.output_dir),
        headless=settings.headless,
        timeout=settings.timeout,
        settle_delay_ms=settings.settle_delay_ms,
    )
    async with executor:
        result = await executor.execute(run_config, cases)

    store = ArtifactStore(settings.output_dir)
    report_path = store.save_report(summarize_execution(result))
    output = result.to_dict()
    output["report"] = str(report_path)
    return output


def cmd_execute(args):
    """Replay the cases saved next to a script."""
    output = asyncio.run(_execute(args))
    print(json.dumps(output, indent=2, ensure_ascii=False, default=str))
    if output.get("failed"):
        sys.exit(1)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="AI-driven UI test generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    autotest providers
    autotest run --provider deepseek --url https://app.local/login --username admin --screen Orders
    autotest run --url https://app.local/login --username admin --execute
    autotest execute output/scripts/test_20250101_120000_000000.py
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Providers
    providers_p = subparsers.add_parser("providers", help="List AI providers")
    providers_p.add_argument("--json", action="store_true", help="Print as JSON")

    # Prompts
    prompts_p = subparsers.add_parser("prompts", help="Export prompt templates")
    prompts_p.add_argument("directory", help="Destination directory")
    prompts_p.add_argument("--from", dest="source", help="Source directory (default: packaged templates)")

    # Run
    run_p = subparsers.add_parser("run", help="Generate tests for a screen")
    run_p.add_argument("--provider", help="AI provider (default: DEFAULT_AI_PROVIDER)")
    run_p.add_argument("--url", required=True, help="Login URL of the application")
    run_p.add_argument("--username", required=True, help="Login user")
    run_p.add_argument("--password", help="Login password")
    run_p.add_argument("--screen", help="Screen (menu entry) to test after login")
    run_p.add_argument("--test-data", dest="test_data", help="Free-form test data for the prompts")
    run_p.add_argument("--prompts-dir", dest="prompts_dir", help="Prompt template directory")
    run_p.add_argument("--output-dir", dest="output_dir", help="Output directory")
    run_p.add_argument("--execute", action="store_true", help="Execute the cases in a browser")
    run_p.add_argument("--headed", action="store_true", help="Show the browser window")

    # Execute
    execute_p = subparsers.add_parser("execute", help="Replay saved cases")
    execute_p.add_argument("script", help="Script (or .cases.json) produced by 'run'")
    execute_p.add_argument("--password", help="Login password (overrides the saved one)")
    execute_p.add_argument("--output-dir", dest="output_dir", help="Output directory")
    execute_p.add_argument("--headed", action="store_true", help="Show the browser window")

    args = parser.parse_args()

    commands = {
        "providers": cmd_providers,
        "prompts": cmd_prompts,
        "run": cmd_run,
        "execute": cmd_execute,
    }

    if args.command not in commands:
        parser.print_help()
        return

    try:
        commands[args.command](args)
    except AutotestError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
