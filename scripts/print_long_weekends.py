import argparse
from datetime import date
from core.formatting import describe_opportunity
from core.holiday_source import fetch_holidays
from core.long_weekend import analyze, analyze_all_policies
from core.workweek import sector_policy

parser = argparse.ArgumentParser(description="Daftar libur panjang dalam satu tahun")
parser.add_argument("year", type=int, nargs="?", default=date.today().year)
parser.add_argument("--saturday-workday", action="store_true", help="hari kerja Senin–Sabtu")
parser.add_argument("--all-policies", action="store_true", help="gabungkan Senin–Jumat dan Senin–Sabtu")
parser.add_argument("--no-cuti", action="store_true", help="cuti bersama tidak dihitung libur (swasta)")
args = parser.parse_args()

holidays = fetch_holidays(args.year)
include_cuti = not args.no_cuti

if not holidays:
    print(f"⚠️ Tidak ada data hari libur untuk {args.year}")

if args.all_policies:
    result = analyze_all_policies(holidays, args.year, include_collective_leave=include_cuti)
else:
    policy = sector_policy(include_cuti, args.saturday_workday)
    print(f"🗓️ {policy.sector_label}, {policy.label}")
    result = analyze(holidays, args.year, policy)

print(f"📅 Libur panjang {args.year}: {len(result)}")
for op in result:
    row = describe_opportunity(op)
    print(f"\n✈️ {row['title']} ({row['duration']})")
    print(f"   {row['period']}")
    if row["holiday"]:
        print(f"   {row['holiday']}")
    if row["suggestion"]:
        print(f"   💡 {row['suggestion']}")
