from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction

from facilities.models import Facility, FacilityType
from inventory_meds.models import Medicine
from inventory_meds.status import today_utc


class Command(BaseCommand):
    help = 'Populate the database with sample veterinary facilities and medicines'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear', action='store_true',
            help='Delete existing medicines and usage records before seeding',
        )

    def handle(self, *args, **options):
        self.stdout.write('Starting to populate veterinary inventory...')

        if options['clear']:
            deleted = Medicine.objects.all().delete()[0]
            self.stdout.write(f'  Cleared {deleted} existing rows')

        facilities = {
            FacilityType.DISPENSARY: Facility.objects.get_or_create(
                name='Central Veterinary Dispensary', type=FacilityType.DISPENSARY)[0],
            FacilityType.HOSPITAL: Facility.objects.get_or_create(
                name='District Animal Hospital', type=FacilityType.HOSPITAL)[0],
            FacilityType.CLINICIAN_CENTER: Facility.objects.get_or_create(
                name='Rural Clinician Center', type=FacilityType.CLINICIAN_CENTER)[0],
            FacilityType.POLYCLINIC: Facility.objects.get_or_create(
                name='City Veterinary Polyclinic', type=FacilityType.POLYCLINIC)[0],
        }

        # (days until expiry or None, stock as a multiple of weekly requirement)
        scenarios = [
            (-30, 2),    # expired
            (-3, 0.5),   # expired and low
            (3, 4),      # expiring soon
            (7, 0.5),    # expiring soon and low
            (60, 0.5),   # low stock
            (180, 3),    # sufficient
            (None, 2),   # no expiry date
        ]

        medicines_data = [
            # Antibiotics
            ('Amoxicillin 250mg', 40),
            ('Oxytetracycline LA', 25),
            ('Enrofloxacin 50mg', 30),
            # Antiparasitics
            ('Ivermectin 1%', 20),
            ('Albendazole Suspension', 35),
            ('Praziquantel 50mg', 15),
            # Anti-inflammatory
            ('Meloxicam 1.5mg/ml', 18),
            ('Dexamethasone Injection', 12),
            # Vaccines
            ('Rabies Vaccine', 50),
            ('Foot and Mouth Vaccine', 60),
            # Other
            ('Calcium Borogluconate', 10),
            ('Vitamin B Complex', 22),
            ('Oral Rehydration Salts', 45),
            ('Chlorhexidine Wash', 8),
        ]

        today = today_utc()
        facility_list = list(facilities.values())
        created_count = 0
        updated_count = 0

        with transaction.atomic():
            for index, (name, weekly_requirement) in enumerate(medicines_data):
                days_offset, stock_factor = scenarios[index % len(scenarios)]
                facility = facility_list[index % len(facility_list)]
                expiry_date = today + timedelta(days=days_offset) if days_offset is not None else None

                medicine, created = Medicine.objects.update_or_create(
                    name=name,
                    facility=facility,
                    defaults={
                        'stock': int(weekly_requirement * stock_factor),
                        'weekly_requirement': weekly_requirement,
                        'expiry_date': expiry_date,
                    },
                )
                if created:
                    created_count += 1
                else:
                    updated_count += 1
                self.stdout.write(
                    f'  {"Created" if created else "Updated"}: {medicine.name} '
                    f'@ {facility.name} - Status: {medicine.status(today)}, Expires: {expiry_date or "N/A"}'
                )

        self.stdout.write(self.style.SUCCESS(
            f'\nSuccessfully populated veterinary inventory!\n'
            f'Created: {created_count} medicines\n'
            f'Updated: {updated_count} medicines\n'
            f'Total: {Medicine.objects.count()} medicines in database'
        ))
