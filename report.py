# report.py
from rich.console import Console
from rich.table import Table

console = Console()


def print_banner(params, preset=None, out=None):
    out = out or console
    title = "PURSUIT / INTERCEPT SIM"
    if preset:
        title += f" | {preset}"
    out.print("=" * 60, style="bold blue")
    out.print(f"[bold green]{title}[/bold green]")
    out.print(f"[dim]Collision threshold {params.collision_threshold} m, "
              f"budget {params.max_ticks} ticks, seed {params.seed}[/dim]")
    out.print("=" * 60, style="bold blue")


def print_outcome(collision, params, out=None):
    out = out or console
    if collision is None:
        out.print(f"❌ No collision occurred within {params.max_ticks} time steps")
        return

    out.print(f"✅ Collision occurred at step {collision.tick} (within {params.max_ticks} time steps)")
    minimum = params.min_approach_angle
    if collision.qualified:
        out.print(f"✅ Angle between velocities is: {collision.angle:.2f}° (greater than {minimum:g}°)")
    else:
        out.print(f"❌ Angle between velocities is: {collision.angle:.2f}° (less than {minimum:g}°)")


def summary_table(collision, params, ticks):
    table = Table(title="ENGAGEMENT SUMMARY")
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Outcome", "COLLISION" if collision else "NO COLLISION")
    table.add_row("Ticks", str(ticks))
    table.add_row("Guidance", "lead pursuit" if params.guidance == "lead" else "pure pursuit")
    table.add_row("Evasion", f"blend {params.blend_weight:.2f}" if params.evasion else "off")
    if collision is not None:
        x, y = collision.point
        table.add_row("Collision Point", f"({x:.2f}, {y:.2f}) m")
        table.add_row("Approach Angle", f"{collision.angle:.2f}°")
        table.add_row("Miss Distance", f"{collision.distance:.2f} m")
    return table


def print_report(collision, params, ticks, out=None):
    out = out or console
    print_outcome(collision, params, out)
    out.print(summary_table(collision, params, ticks))
