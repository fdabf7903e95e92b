from dentalclinic.models.doctor import Doctor, Weekday, WorkShift
from dentalclinic.models.patient import Patient
from dentalclinic.models.service import Service
from dentalclinic.models.visit import VisitRecord
from dentalclinic.models.payment import Payment
